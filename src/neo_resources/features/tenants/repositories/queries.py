"""Tenant SQL query constants, parameterized by schema."""

TENANT_INSERT = """
    INSERT INTO {schema}.tenants (
        tenant_name, tenant_code, description, created_at, updated_at
    ) VALUES (
        $1, $2, $3, $4, $5
    )
    RETURNING id
"""

TENANT_GET_BY_ID = """
    SELECT id, tenant_name, tenant_code, description, created_at, updated_at
    FROM {schema}.tenants
    WHERE id = $1
"""

TENANT_DELETE = """
    DELETE FROM {schema}.tenants WHERE id = $1
"""
