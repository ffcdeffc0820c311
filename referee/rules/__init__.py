"""Decision rule table: the authored, ordered, immutable rule catalogue.

Rules are plain data. The table is built once at startup and handed to the
engine explicitly; nothing looks it up through global state.
"""
