"""REST API for the Courtbook payment and policy resolver."""
