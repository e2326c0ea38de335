# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines every MCP tool the agent can call.  Each tool is a thin wrapper
#   around core/; it handles input/output formatting and nothing else.
#
# THE TOOLS:
#   open_concave_earth     → props for the inside-the-globe navigator
#   get_landmark_details   → full record for a marker the user clicked
#   build_arduino_circuit  → props for the Arduino circuit workspace
#
# WIDGET RESPONSES:
#   Tools that open a widget return
#       {"widget": "<widget name>", "props": {...}, "summary": "..."}
#   The host renders `props` with the named widget; `summary` is the short
#   text the model sees.
#
# SESSION SCOPING:
#   open_concave_earth can import caller-supplied markers, and
#   get_landmark_details must be able to find them again.  Those imports
#   live in a LandmarkCatalog keyed by the MCP session id, so one client's
#   markers never leak into another client's lookups.
#
# RUNNING THIS SERVER:
#   a) Standalone:  python -m tools.mcp_server
#   b) Spawned by the ADK agent over stdio (agent/spatial_agent.py)
# =============================================================================

import json
import logging
import sys
from dataclasses import asdict
from typing import Any, Optional

from fastmcp import Context, FastMCP

from core.circuits import build_workspace, diagram_components
from core.landmarks import CatalogRegistry
from core.settings import ViewTuning

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because the MCP server talks to the agent over STDOUT.
# Anything printed to stdout would corrupt the JSON-RPC stream.
#
# ANSI colors: CYAN for requests, YELLOW for status, GREEN for responses.
# =============================================================================
_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: dict) -> dict:
    """Log the tool response as compact JSON in GREEN, then return it."""
    logging.info(f"{_GREEN}  ← {tool_name} response: {json.dumps(result, separators=(',', ':'))}{_RESET}")
    return result


# =============================================================================
# Server instance & per-session state
# =============================================================================
mcp = FastMCP("spatial-widget-demos")

_catalogs = CatalogRegistry(tuning=ViewTuning.from_env())


def _session_key(ctx: Context) -> str:
    return ctx.session_id or "default"


# =============================================================================
# TOOL 1: open_concave_earth
# =============================================================================
# Returns the marker set plus the camera the viewer should start with.
# The projection itself happens in the widget (core/projection.py is the
# reference implementation of that math).
# =============================================================================
@mcp.tool()
def open_concave_earth(
    ctx: Context,
    focus: str = "",
    markers: Optional[list[dict[str, Any]]] = None,
) -> dict:
    """Open an inside-the-Earth map where the user looks around the globe interior.

    WHEN TO CALL THIS: When the user wants to explore places on a globe,
    compare where landmarks sit, or see results from a maps search in 3D.

    Args:
        focus: Optional keyword to prioritize landmarks in the initial view.
               Matched case-insensitively against name, country and type
               (e.g., "terrain", "Korea", "london").
        markers: Optional list of places to show instead of the built-in
                 landmarks.  Each item needs "name", "lat" and "lng";
                 "id", "country" and "type" are optional.

    Returns:
        A dict with:
          - widget: "concave-earth"
          - props: {title, focus, camera: {lat, lng, fov}, markers: [...]}
          - summary: How many landmark nodes were loaded
    """
    _log_request("open_concave_earth", focus=focus,
                 markers=len(markers) if markers is not None else None)

    catalog = _catalogs.for_session(_session_key(ctx))
    view = catalog.search(focus=focus, external=markers)
    _log_status(f"{len(view.markers)} markers, camera at "
                f"({view.camera.lat:.2f}, {view.camera.lng:.2f})")

    return _log_response("open_concave_earth", {
        "widget": "concave-earth",
        "props": asdict(view),
        "summary": f"Loaded {len(view.markers)} landmark nodes for concave view",
    })


# =============================================================================
# TOOL 2: get_landmark_details
# =============================================================================
# Never fails on a bad id: the widget shows the "Unknown location" record.
# =============================================================================
@mcp.tool()
def get_landmark_details(ctx: Context, id: str) -> dict:
    """Get details for a landmark shown in the concave Earth viewer.

    WHEN TO CALL THIS: When the user asks about a specific marker, or after
    open_concave_earth to describe the landmark in focus.

    Args:
        id: The landmark id from the viewer's markers (e.g., "seoul").

    Returns:
        A dict with id, name, country, type, lat, lng and facts (list of
        strings).  Unknown ids return name "Unknown location".
    """
    _log_request("get_landmark_details", id=id)

    details = _catalogs.for_session(_session_key(ctx)).details(id)
    _log_status(f"Resolved {id!r} → {details.name}")
    return _log_response("get_landmark_details", asdict(details))


# =============================================================================
# TOOL 3: build_arduino_circuit
# =============================================================================
@mcp.tool()
def build_arduino_circuit(prompt: str) -> dict:
    """Build an Arduino circuit workspace: sketch code, schematic notes and parts list.

    WHEN TO CALL THIS: When the user wants to build a small Arduino project
    (blinking LED, push button, potentiometer-driven servo, ...).

    Args:
        prompt: What the user wants the circuit to do.

    Returns:
        A dict with:
          - widget: "arduino-circuit"
          - props: {prompt, filename, code, diagram_title, diagram_notes,
                    components: [{name, qty, purchase_url}], highlighted}
          - summary: Which sketch was prepared
        Returns an error message if the prompt is empty.
    """
    _log_request("build_arduino_circuit", prompt=prompt)

    if not prompt or not prompt.strip():
        _log_status("Empty prompt")
        return _log_response("build_arduino_circuit", {
            "error": "Describe the circuit you want to build.",
            "hint": "For example: 'blink an LED', 'read a push button', 'servo follows a knob'.",
        })

    workspace = build_workspace(prompt)
    shown = [c.name for c in diagram_components(workspace)]
    _log_status(f"Template {workspace.filename}, diagram parts: {shown}")

    return _log_response("build_arduino_circuit", {
        "widget": "arduino-circuit",
        "props": asdict(workspace),
        "summary": (
            f"Prepared {workspace.filename} with "
            f"{len(workspace.components)} components"
        ),
    })


# =============================================================================
# Server entry point
# =============================================================================
if __name__ == "__main__":
    mcp.run()
