"""Config manager — one JSON document in a Supabase table.

The document lives in ``openclaw_configs.value`` on the row ``key = 'main_config'``.
It is read whole, deep-merged with an update, and written back whole.
"""
