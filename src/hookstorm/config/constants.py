"""Constants shared by configuration and the webhook feature."""

# Endpoint lifetime when no override is supplied (24 hours)
DEFAULT_WEBHOOK_EXPIRY_SECONDS = 86400

# Total time budget for a single replay request
DEFAULT_REPLAY_TIMEOUT_SECONDS = 10.0
