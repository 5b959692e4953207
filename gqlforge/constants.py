"""gqlforge constants and configuration values."""

# GraphQL Endpoint
DEFAULT_GRAPHQL_ENDPOINT = "http://localhost:4000/graphql"
DEFAULT_TIMEOUT_MS = 30000
DEFAULT_RETRY_ATTEMPTS = 3
MAX_RETRY_ATTEMPTS = 10

# Retry Backoff
BACKOFF_BASE_MS = 1000
BACKOFF_MAX_MS = 10000

# Request Headers
CONTENT_TYPE_JSON = "application/json"
AUTHORIZATION_HEADER = "Authorization"

# Logging
LOG_COMPONENT = "GraphQLClient"

# Test Data
TEST_DATA_SCOPES = ["unit", "integration", "e2e", "performance"]
NAME_PATTERN = r"^[a-zA-Z0-9\s\-_]{3,100}$"
