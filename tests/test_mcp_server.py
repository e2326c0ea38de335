import asyncio

from fastmcp import Client

from tools.mcp_server import mcp


def _run(calls):
    """Run (tool, args) calls in order over one in-memory client session."""
    async def scenario():
        async with Client(mcp) as client:
            results = []
            for name, args in calls:
                result = await client.call_tool(name, args)
                results.append(result.structured_content)
            return results

    return asyncio.run(scenario())


def test_tools_are_registered():
    async def scenario():
        async with Client(mcp) as client:
            return {tool.name for tool in await client.list_tools()}

    names = asyncio.run(scenario())
    assert {"open_concave_earth", "get_landmark_details", "build_arduino_circuit"} <= names


def test_open_concave_earth_returns_widget_props():
    (result,) = _run([("open_concave_earth", {"focus": "terrain"})])

    assert result["widget"] == "concave-earth"
    assert result["summary"] == "Loaded 2 landmark nodes for concave view"
    props = result["props"]
    assert props["title"] == "Concave Earth Navigator"
    assert props["focus"] == "terrain"
    assert props["camera"]["fov"] == 78
    assert [m["id"] for m in props["markers"]] == ["andes", "greatbarrierreef"]


def test_get_landmark_details_unknown_id():
    (result,) = _run([("get_landmark_details", {"id": "x"})])
    assert result["name"] == "Unknown location"
    assert result["facts"] == ["No landmark details found."]


def test_imported_markers_resolve_within_the_same_session():
    opened, details = _run([
        ("open_concave_earth", {"markers": [{"name": "Sydney Opera House", "lat": -33.8568, "lng": 151.2153}]}),
        ("get_landmark_details", {"id": "google-0-sydney-opera-house"}),
    ])
    assert opened["props"]["markers"][0]["id"] == "google-0-sydney-opera-house"
    assert details["name"] == "Sydney Opera House"


def test_build_arduino_circuit():
    (result,) = _run([("build_arduino_circuit", {"prompt": "blink an LED"})])

    assert result["widget"] == "arduino-circuit"
    props = result["props"]
    assert props["filename"] == "blink_led.ino"
    assert props["highlighted"][0][0]["kind"] == "comment"
    assert props["components"][0]["purchase_url"].startswith("https://")


def test_build_arduino_circuit_rejects_empty_prompt():
    (result,) = _run([("build_arduino_circuit", {"prompt": "   "})])
    assert "error" in result
    assert "hint" in result
