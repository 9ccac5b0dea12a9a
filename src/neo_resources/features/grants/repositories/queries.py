"""Grant SQL query constants, parameterized by schema."""

GRANT_INSERT = """
    INSERT INTO {schema}.resources_users (
        resources_id, user_id, created_at, updated_at
    ) VALUES (
        $1, $2, $3, $4
    )
    RETURNING id
"""

GRANT_DELETE = """
    DELETE FROM {schema}.resources_users WHERE id = $1
"""

GRANT_GET_BY_ID = """
    SELECT id, resources_id, user_id, created_at, updated_at
    FROM {schema}.resources_users
    WHERE id = $1
"""

GRANT_EXISTS = """
    SELECT EXISTS (
        SELECT 1 FROM {schema}.resources_users
        WHERE resources_id = $1 AND user_id = $2
    )
"""

GRANT_RESOURCE_IDS_BY_USER = """
    SELECT DISTINCT resources_id FROM {schema}.resources_users
    WHERE user_id = $1
"""

# Inner join drops grants whose resource has been deleted
GRANT_ALIASES_BY_USER = """
    SELECT DISTINCT r.alias
    FROM {schema}.resources r
    JOIN {schema}.resources_users ru ON ru.resources_id = r.id
    WHERE ru.user_id = $1
    AND r.alias = ANY($2::varchar[])
"""
