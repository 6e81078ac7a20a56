"""Constants for Camera model field names"""


class CameraFields:
    """Persisted/wire field names for Camera records (snake_case boundary names)"""
    ID = "id"
    NAME = "name"
    IP_ADDRESS = "ip_address"
    PORT = "port"
    STREAM_URL = "stream_url"
    STATUS = "status"
    GROUP_NAME = "group_name"
    RECORDING_INTERVAL_MIN = "recording_interval_min"
    RETENTION_DAYS = "retention_days"
    ADDED_AT = "added_at"
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
