"""Constants for Product model field names"""


class ProductFields:
    """Field name constants for Product model"""
    ID = "id"
    OWNER_ID = "owner_id"
    TITLE = "title"
    IMAGE = "image"
    DESCRIPTION = "description"
    PRICE = "price"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
    
    # Sort keys accepted from clients, mapped to stored field names.
    # camelCase aliases are kept for clients written against the JS API.
    SORTABLE = {
        "title": TITLE,
        "price": PRICE,
        "description": DESCRIPTION,
        "created_at": CREATED_AT,
        "createdAt": CREATED_AT,
        "updated_at": UPDATED_AT,
        "updatedAt": UPDATED_AT,
    }
