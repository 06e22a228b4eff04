"""ao compute unit integration: configuration, dry-run client and token info provider."""
