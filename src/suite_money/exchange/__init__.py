"""Exchange rates and the registry that stores them by currency pair."""
