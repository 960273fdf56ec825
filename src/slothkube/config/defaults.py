"""Default configuration values for slothkube."""

# Upper bound on previous deployments kept in a record
MAX_HISTORY_ENTRIES = 10

# Ledger configuration defaults
DEFAULT_LEDGER_CONFIG: dict[str, int | str] = {
    "engine_version": "3.x",
    "history_limit": MAX_HISTORY_ENTRIES,
}

# Environment variables a sanitized configuration refers to, by provider field
CREDENTIAL_PLACEHOLDERS: dict[str, dict[str, str]] = {
    "digitalocean": {"token": "DIGITALOCEAN_TOKEN"},
    "linode": {
        "token": "LINODE_TOKEN",
        "root_password": "LINODE_ROOT_PASSWORD",
    },
    "aws": {
        "access_key_id": "AWS_ACCESS_KEY_ID",
        "secret_access_key": "AWS_SECRET_ACCESS_KEY",
    },
    "azure": {
        "client_id": "AZURE_CLIENT_ID",
        "client_secret": "AZURE_CLIENT_SECRET",
        "tenant_id": "AZURE_TENANT_ID",
        "subscription_id": "AZURE_SUBSCRIPTION_ID",
    },
    "gcp": {"credentials": "GCP_CREDENTIALS"},
    "hetzner": {"token": "HETZNER_TOKEN"},
}

# Local stack state location, relative to the project root
STATE_DIR_NAME = ".slothkube"
STATE_FILE_NAME = "stacks.json"
