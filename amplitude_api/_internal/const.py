import enum
import typing

# Substituted for user_id when an event has no associated account
USER_WITH_NO_ACCOUNT: typing.Final = "user who doesn't have an account"

DEFAULT_LOGGER_NAME: typing.Final = "amplitude_api"


class ErrorCode(enum.Enum):
    EVENT_INVALID = "event_invalid"
    OUTPUT_UNSERIALIZABLE = "output_unserializable"
    PRICE_MISSING_FOR_PRODUCT_ID = "price_missing_for_product_id"
    PRICE_MISSING_FOR_REVENUE_TYPE = "price_missing_for_revenue_type"
    UNKNOWN = "unknown"


class EventField(enum.Enum):
    """
    Symbolic attribute keys. When an attribute bag holds both an EventField
    key and a plain string key for the same field, the EventField key wins.
    """

    APP_VERSION = "app_version"
    CARRIER = "carrier"
    DEVICE_BRAND = "device_brand"
    DEVICE_ID = "device_id"
    DEVICE_MANUFACTURER = "device_manufacturer"
    DEVICE_MODEL = "device_model"
    DEVICE_TYPE = "device_type"
    EVENT_PROPERTIES = "event_properties"
    EVENT_TYPE = "event_type"
    INSERT_ID = "insert_id"
    IP = "ip"
    OS_NAME = "os_name"
    OS_VERSION = "os_version"
    PLATFORM = "platform"
    PRICE = "price"
    PRODUCT_ID = "product_id"
    QUANTITY = "quantity"
    REVENUE_TYPE = "revenue_type"
    SESSION_ID = "session_id"
    TIME = "time"
    USER_ID = "user_id"
    USER_PROPERTIES = "user_properties"


# Order matters: serialized events list these keys in this order
DEVICE_FIELDS: typing.Final = (
    EventField.APP_VERSION,
    EventField.PLATFORM,
    EventField.OS_NAME,
    EventField.OS_VERSION,
    EventField.DEVICE_BRAND,
    EventField.DEVICE_MANUFACTURER,
    EventField.DEVICE_MODEL,
    EventField.DEVICE_TYPE,
    EventField.CARRIER,
)


class RevenueKey(enum.Enum):
    PRICE = "price"
    PRODUCT_ID = "productId"
    QUANTITY = "quantity"
    REVENUE_TYPE = "revenueType"
