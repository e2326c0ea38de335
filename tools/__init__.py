# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool wrappers.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between the agent framework and core/.
#   Each tool:
#     1. Calls a pure function (or catalog method) from core/
#     2. Converts dataclasses → dicts with asdict() for JSON transport
#     3. Wraps the result the way the widget host expects:
#          {"widget": <name>, "props": {...}, "summary": "<one line>"}
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT project markers or move cameras (that's core/)
#   - They do NOT render anything (the widget host does)
#   - They do NOT know about Google ADK
# =============================================================================
