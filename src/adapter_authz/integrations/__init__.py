"""Host adapter integrations for adapter-authz."""
