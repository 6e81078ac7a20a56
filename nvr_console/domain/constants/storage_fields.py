"""Constants for StorageConfig model field names"""


class StorageConfigFields:
    """Persisted/wire field names for storage backend configurations"""
    ID = "id"
    TYPE = "type"
    NAME = "name"
    CONFIG = "config"
    IS_ACTIVE = "is_active"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    
    # MongoDB specific
    MONGO_ID = "_id"
