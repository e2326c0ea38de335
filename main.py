# =============================================================================
# main.py  —  Entry Point for the Spatial Widget Guide Agent
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Loads .env (OPENROUTER_API_KEY, AGENT_MODEL, CONCAVE_* tuning)
#   2. Creates the Google ADK agent (agent/spatial_agent.py)
#   3. Starts an interactive console session
#   4. Streams each answer, printing the tools the agent calls
#
# TRY:
#   "Show me the terrain landmarks from inside the Earth"
#   "Tell me more about seoul"
#   "I want a button that turns on an LED"
# =============================================================================

import asyncio

from dotenv import load_dotenv

# Must run before the agent is created: LiteLlm reads its API key from the
# environment when it initializes.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.spatial_agent import create_agent

APP_NAME = "spatial_widget_demos"
USER_ID = "demo_user"


async def run_agent():
    """Run the widget guide agent interactively until the user quits."""

    print("=" * 70)
    print("  SPATIAL WIDGET GUIDE")
    print("  Concave Earth navigator + Arduino circuit workspace")
    print("=" * 70)
    print("\n🔧 Initializing agent...")
    agent = create_agent()

    # InMemorySessionService keeps history in RAM: fine for a demo.
    session_service = InMemorySessionService()
    runner = Runner(
        agent=agent,
        app_name=APP_NAME,
        session_service=session_service,
    )
    session = await session_service.create_session(
        app_name=APP_NAME,
        user_id=USER_ID,
    )

    print("✅ Agent initialized and ready!\n")
    print("💬 Ask for a place on the globe or an Arduino circuit.")
    print("   (Type 'quit' to exit)\n")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\n👋 Goodbye!")
            break

        if not user_input:
            continue

        user_message = types.Content(
            role="user",
            parts=[types.Part(text=user_input)],
        )

        print("\n🤖 Agent is thinking...\n")
        print("-" * 70)

        final_response = ""

        async for event in runner.run_async(
            user_id=USER_ID,
            session_id=session.id,
            new_message=user_message,
        ):
            if event.content and event.content.parts:
                for part in event.content.parts:
                    if getattr(part, "text", None):
                        final_response = part.text

                    if getattr(part, "function_call", None):
                        print(f"  🔧 Calling tool: {part.function_call.name}")

        print("-" * 70)
        if final_response:
            print(f"\n🤖 Agent:\n\n{final_response}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")

        print("\n" + "=" * 70)


if __name__ == "__main__":
    asyncio.run(run_agent())
