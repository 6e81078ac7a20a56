"""Constants for Group model field names"""


class GroupFields:
    """Persisted/wire field names for Group records"""
    NAME = "name"
    CREATED_AT = "created_at"
    
    # MongoDB specific
    MONGO_ID = "_id"
