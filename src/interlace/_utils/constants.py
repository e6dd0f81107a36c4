# Environment variables
ENV_BASE_URL = "INTERLACE_BASE_URL"
ENV_CLIENT_ID = "INTERLACE_CLIENT_ID"
ENV_ACCESS_TOKEN = "INTERLACE_ACCESS_TOKEN"
ENV_WEBHOOK_SECRET = "INTERLACE_WEBHOOK_SECRET"
ENV_TIMEOUT = "INTERLACE_TIMEOUT"

# Environments
SANDBOX_BASE_URL = "https://api-sandbox.interlace.money"
PRODUCTION_BASE_URL = "https://api.interlace.money"

# Headers
HEADER_ACCEPT = "Accept"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_USER_AGENT = "User-Agent"
HEADER_ACCESS_TOKEN = "x-access-token"
HEADER_WEBHOOK_SIGNATURE = "X-Interlace-Signature"

CONTENT_TYPE_JSON = "application/json"

# Response codes
SUCCESS_CODE = "000000"
PARSE_ERROR_CODE = "PARSE_ERROR"
PARSE_ERROR_MESSAGE = "Failed to parse error response"
ACCOUNT_NOT_FOUND_CODE = "ACCOUNT_NOT_FOUND"

API_PREFIX = "/open-api/v3"
