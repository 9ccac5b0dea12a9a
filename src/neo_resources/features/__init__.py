"""Feature modules: resources, grants, users, tenants, ownership, authorization."""
