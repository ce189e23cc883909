"""Memory adapter — short text records in a Supabase table.

Table layout (``openclaw_memories`` by default):
    id          backend-assigned
    agent_id    text, "main" when not given
    user_id     text, "unknown" when not given
    content     text, never empty
    metadata    jsonb
    created_at  backend-assigned, search orders by it newest first

Records are only ever inserted and read; nothing here updates or deletes them.
"""
