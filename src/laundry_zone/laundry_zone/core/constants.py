"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

TOKEN_TTL_HOURS = 24
JWT_ALGORITHM = "HS256"

# Demo convenience passwords for customers created by staff, not a security feature.
DEFAULT_CUSTOMER_PASSWORD = "123456"
ORDER_INTAKE_CUSTOMER_PASSWORD = "default123"

MIN_PASSWORD_LENGTH = 6
STATISTICS_MONTHS = 6

SERVICE_ID_PATTERN = r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$"
