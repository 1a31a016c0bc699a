"""
Shopify constants — global id format, enumerations, field patterns.

Every value the validator catalogue and the translators agree on lives here.
"""

GID_PLATFORM: str = "shopify"
GID_PREFIX: str = f"gid://{GID_PLATFORM}/"

# Option value sent in productOptions when the real values arrive through variants
OPTION_PLACEHOLDER_VALUE: str = "_"

# Number of option slots a REST variant can carry (option1..option3)
MAX_VARIANT_OPTIONS: int = 3

PRODUCT_STATUSES_REST = ("active", "archived", "draft")
PRODUCT_STATUSES_GRAPHQL = ("ACTIVE", "ARCHIVED", "DRAFT")
PUBLISHED_SCOPES = ("web", "global")
WEIGHT_UNITS = ("g", "kg", "oz", "lb")
INVENTORY_POLICIES = ("deny", "continue")
ORDER_CANCEL_REASONS = ("CUSTOMER", "DECLINED", "FRAUD", "INVENTORY", "OTHER")
FINANCIAL_STATUSES = (
    "pending",
    "authorized",
    "partially_paid",
    "paid",
    "partially_refunded",
    "refunded",
    "voided",
)
TRANSACTION_KINDS = ("authorization", "capture", "sale", "void", "refund")

PRICE_PATTERN: str = r"^\d+\.?\d{0,2}$"
CURRENCY_PATTERN: str = r"^[A-Z]{3}$"
HANDLE_PATTERN: str = r"^[a-z0-9-]*$"
TITLE_PATTERN: str = r"^.{1,255}$"
IMAGE_URL_PATTERN: str = r"(?i)^https?://.+\.(jpg|jpeg|png|gif|webp)$"

STATUS_NOTE_ADDED: str = "note_added"
STATUS_TIMELINE_COMMENT: str = "timeline_comment_added"
