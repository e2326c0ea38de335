# =============================================================================
# agent/spatial_agent.py  —  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates the ADK agent that talks to the user and opens widgets by
#   calling our FastMCP tools.
#
#   ┌───────────────────────────────┐        ┌───────────────────────────┐
#   │  Google ADK Agent             │  MCP   │  FastMCP Server           │
#   │  prompt + LiteLlm model       │ ─────▶ │  (tools/mcp_server.py)    │
#   │                               │ stdio  │  • open_concave_earth     │
#   └───────────────────────────────┘        │  • get_landmark_details   │
#                                            │  • build_arduino_circuit  │
#                                            └───────────────────────────┘
#                                                        │
#                                                        ▼
#                                            ┌───────────────────────────┐
#                                            │  core/ (pure Python)      │
#                                            └───────────────────────────┘
#
# MODEL SELECTION:
#   LiteLlm routes the model string to a provider.  The default goes
#   through OpenRouter (reads OPENROUTER_API_KEY).  Set AGENT_MODEL to use
#   a different one, e.g. "openrouter/anthropic/claude-3.5-sonnet".
# =============================================================================

import os

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_widget_guide_prompt

DEFAULT_MODEL = "openrouter/openai/gpt-4o"


def create_agent() -> Agent:
    """Create the widget guide agent wired to the FastMCP tool server.

    Returns:
        A configured Google ADK Agent instance.
    """

    # "uv run" makes the subprocess use the project's .venv, and "-m" from the
    # project root keeps core/ importable.
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    mcp_tools = MCPToolset(
        connection_params=StdioServerParameters(
            command="uv",
            args=["run", "python", "-m", "tools.mcp_server"],
            cwd=project_root,                       # core/ resolves from here
        ),
    )

    model_name = os.environ.get("AGENT_MODEL", DEFAULT_MODEL)

    return Agent(
        name="spatial_widget_guide",
        model=LiteLlm(model=model_name),
        instruction=get_widget_guide_prompt(),
        tools=[mcp_tools],
    )
