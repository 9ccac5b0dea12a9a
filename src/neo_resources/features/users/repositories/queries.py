"""User SQL query constants, parameterized by schema."""

USER_INSERT = """
    INSERT INTO {schema}.users (
        user_name, tenant_id, user_type, email, created_at, updated_at
    ) VALUES (
        $1, $2, $3, $4, $5, $6
    )
    RETURNING id
"""

USER_GET_BY_ID = """
    SELECT id, user_name, tenant_id, user_type, email, created_at, updated_at
    FROM {schema}.users
    WHERE id = $1
"""

USER_DELETE = """
    DELETE FROM {schema}.users WHERE id = $1
"""
