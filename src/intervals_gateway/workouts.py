"""
Workout library tools for the Intervals.icu MCP server.

Workouts and the folders that organize them, including folder sharing.
"""

from typing import Any, Dict, List

from intervals_gateway.client_factory import get_client
from intervals_gateway.sdk import workouts as sdk_workouts
from intervals_gateway.sdk.types import DEFAULT_ATHLETE_ID
from intervals_gateway.utils import to_json


def register_tools(app):
    """Register workout and folder tools with the MCP app."""

    # ── Workouts ─────────────────────────────────────────────────────────

    @app.tool()
    async def fetch_workouts(athlete_id: str = DEFAULT_ATHLETE_ID) -> str:
        """
        List workouts in the athlete's workout library.

        Args:
            athlete_id: Athlete ID. Use "0" for the authenticated user (default)
        """
        client = get_client()
        return to_json(await sdk_workouts.list_workouts(client, athlete_id or DEFAULT_ATHLETE_ID))

    @app.tool()
    async def get_workout(workout_id: str, athlete_id: str = DEFAULT_ATHLETE_ID) -> str:
        """
        Get a single workout from the library by ID.

        Args:
            workout_id: The workout ID
            athlete_id: Athlete ID. Use "0" for the authenticated user (default)
        """
        client = get_client()
        return to_json(await sdk_workouts.get_workout(client, athlete_id or DEFAULT_ATHLETE_ID, workout_id))

    @app.tool()
    async def create_workout(
        name: str,
        athlete_id: str = DEFAULT_ATHLETE_ID,
        description: str = None,
        category: str = None,
        steps: List[Any] = None,
    ) -> str:
        """
        Add a workout to the athlete's workout library.

        Args:
            name: Workout name
            athlete_id: Athlete ID. Use "0" for the authenticated user (default)
            description: Workout description
            category: Activity category (e.g. "Run", "Ride", "Swim")
            steps: Workout steps/structure (array of step objects)

        Returns:
            JSON with the created workout
        """
        payload = {"name": name}
        if description:
            payload["description"] = description
        if category:
            payload["category"] = category
        if steps:
            payload["steps"] = steps

        client = get_client()
        return to_json(await sdk_workouts.create_workout(client, athlete_id or DEFAULT_ATHLETE_ID, payload))

    @app.tool()
    async def update_workout(
        workout_id: str,
        body: Dict[str, Any],
        athlete_id: str = DEFAULT_ATHLETE_ID,
    ) -> str:
        """
        Update an existing workout in the library.

        Args:
            workout_id: The workout ID to update
            body: Workout fields to change, e.g. {"name": "New name"}
            athlete_id: Athlete ID. Use "0" for the authenticated user (default)
        """
        client = get_client()
        data = await sdk_workouts.update_workout(client, athlete_id or DEFAULT_ATHLETE_ID, workout_id, body)
        return to_json(data)

    @app.tool()
    async def delete_workout(workout_id: str, athlete_id: str = DEFAULT_ATHLETE_ID) -> str:
        """
        Delete a workout from the library by ID.

        Args:
            workout_id: The workout ID to delete
            athlete_id: Athlete ID. Use "0" for the authenticated user (default)
        """
        client = get_client()
        await sdk_workouts.delete_workout(client, athlete_id or DEFAULT_ATHLETE_ID, workout_id)
        return to_json({"deleted": True, "workout_id": workout_id})

    # ── Folders ──────────────────────────────────────────────────────────

    @app.tool()
    async def fetch_folders(athlete_id: str = DEFAULT_ATHLETE_ID) -> str:
        """
        List all workout folders (and their workouts) for the athlete.

        Args:
            athlete_id: Athlete ID. Use "0" for the authenticated user (default)
        """
        client = get_client()
        return to_json(await sdk_workouts.list_folders(client, athlete_id or DEFAULT_ATHLETE_ID))

    @app.tool()
    async def create_folder(
        name: str,
        athlete_id: str = DEFAULT_ATHLETE_ID,
        description: str = None,
        type: str = None,
    ) -> str:
        """
        Create a workout folder.

        Args:
            name: Folder name
            athlete_id: Athlete ID. Use "0" for the authenticated user (default)
            description: Folder description
            type: Folder type
        """
        payload = {"name": name}
        if description:
            payload["description"] = description
        if type:
            payload["type"] = type

        client = get_client()
        return to_json(await sdk_workouts.create_folder(client, athlete_id or DEFAULT_ATHLETE_ID, payload))

    @app.tool()
    async def update_folder(
        folder_id: str,
        body: Dict[str, Any],
        athlete_id: str = DEFAULT_ATHLETE_ID,
    ) -> str:
        """
        Update a workout folder (name, description, etc.).

        Args:
            folder_id: The folder ID to update
            body: Folder fields to change, e.g. {"name": "New name"}
            athlete_id: Athlete ID. Use "0" for the authenticated user (default)
        """
        client = get_client()
        data = await sdk_workouts.update_folder(client, athlete_id or DEFAULT_ATHLETE_ID, folder_id, body)
        return to_json(data)

    @app.tool()
    async def delete_folder(folder_id: str, athlete_id: str = DEFAULT_ATHLETE_ID) -> str:
        """
        Delete a workout folder by ID.

        Args:
            folder_id: The folder ID to delete
            athlete_id: Athlete ID. Use "0" for the authenticated user (default)
        """
        client = get_client()
        await sdk_workouts.delete_folder(client, athlete_id or DEFAULT_ATHLETE_ID, folder_id)
        return to_json({"deleted": True, "folder_id": folder_id})

    @app.tool()
    async def get_folder_shared_with(folder_id: str, athlete_id: str = DEFAULT_ATHLETE_ID) -> str:
        """
        Show who a folder has been shared with.

        Args:
            folder_id: The folder ID
            athlete_id: Athlete ID. Use "0" for the authenticated user (default)
        """
        client = get_client()
        data = await sdk_workouts.get_folder_shared_with(client, athlete_id or DEFAULT_ATHLETE_ID, folder_id)
        return to_json(data)

    @app.tool()
    async def update_folder_shared_with(
        folder_id: str,
        body: Dict[str, Any],
        athlete_id: str = DEFAULT_ATHLETE_ID,
    ) -> str:
        """
        Update who a folder is shared with.

        Args:
            folder_id: The folder ID to update sharing for
            body: Sharing payload as accepted by Intervals.icu
            athlete_id: Athlete ID. Use "0" for the authenticated user (default)
        """
        client = get_client()
        data = await sdk_workouts.update_folder_shared_with(
            client, athlete_id or DEFAULT_ATHLETE_ID, folder_id, body,
        )
        return to_json(data)

    return app
