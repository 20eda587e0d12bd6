"""Constants for User model field names"""


class UserFields:
    """Field name constants for User documents"""
    ID = "id"
    NAME = "name"
    EMAIL = "email"
    HASHED_PASSWORD = "hashed_password"
    
    # MongoDB specific
    MONGO_ID = "_id"
    
    # Unique index backing email uniqueness
    EMAIL_INDEX = "uniq_email"
