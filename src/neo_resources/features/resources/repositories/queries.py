"""Resource SQL query constants.

All queries are parameterized by schema; ``{where}`` is filled by
``build_resource_where``.
"""

RESOURCE_COLUMNS = """
    id, alias, type, user_id, description, file_name, size, created_at, updated_at
"""

RESOURCE_INSERT = """
    INSERT INTO {schema}.resources (
        alias, type, user_id, description, file_name, size, created_at, updated_at
    ) VALUES (
        $1, $2, $3, $4, $5, $6, $7, $8
    )
    RETURNING id
"""

RESOURCE_GET_BY_ID = """
    SELECT """ + RESOURCE_COLUMNS + """ FROM {schema}.resources
    WHERE id = $1
"""

RESOURCE_UPDATE = """
    UPDATE {schema}.resources SET
        {assignments},
        updated_at = NOW()
    WHERE id = $1
"""

RESOURCE_DELETE = """
    DELETE FROM {schema}.resources WHERE id = $1
"""

RESOURCE_FIND = """
    SELECT """ + RESOURCE_COLUMNS + """ FROM {schema}.resources
    WHERE {where}
    ORDER BY id ASC
"""

RESOURCE_FIND_PAGE = """
    SELECT """ + RESOURCE_COLUMNS + """ FROM {schema}.resources
    WHERE {where}
    ORDER BY id ASC
    LIMIT ${limit} OFFSET ${offset}
"""

RESOURCE_COUNT = """
    SELECT COUNT(*) FROM {schema}.resources
    WHERE {where}
"""
