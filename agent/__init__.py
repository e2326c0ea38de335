# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the Google ADK agent configuration.
#
# ARCHITECTURAL ROLE:
#   The agent/ layer decides WHICH widget tool to open and WHEN:
#     1. Receives the user's request ("show me Seoul from the inside",
#        "help me wire a button to an LED")
#     2. Calls the matching MCP tool (tools/mcp_server.py)
#     3. Explains what the widget now shows
#
# WHAT THE AGENT IS NOT:
#   - It is NOT the camera or projection math (that's in core/)
#   - It is NOT the tool implementations (that's in tools/)
#
# THE LLM'S ROLE:
#   The model (via LiteLlm) reads the system prompt and the tool
#   docstrings, then picks tools on its own.
# =============================================================================
