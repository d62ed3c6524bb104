"""
Intervals.icu workout library and folder SDK functions.
"""

from typing import Any, Dict, List

from intervals_gateway.sdk.client import IntervalsClient


# ── Workouts ─────────────────────────────────────────────────────────────

async def list_workouts(client: IntervalsClient, athlete_id: str) -> List[Dict[str, Any]]:
    """GET /athlete/{id}/workouts"""
    return await client.request("GET", f"/athlete/{athlete_id}/workouts")


async def get_workout(client: IntervalsClient, athlete_id: str, workout_id: str) -> Dict[str, Any]:
    """GET /athlete/{id}/workouts/{workout_id}"""
    return await client.request("GET", f"/athlete/{athlete_id}/workouts/{workout_id}")


async def create_workout(
    client: IntervalsClient,
    athlete_id: str,
    payload: Dict[str, Any],
) -> Dict[str, Any]:
    """POST /athlete/{id}/workouts"""
    return await client.request("POST", f"/athlete/{athlete_id}/workouts", json_data=payload)


async def update_workout(
    client: IntervalsClient,
    athlete_id: str,
    workout_id: str,
    body: Dict[str, Any],
) -> Dict[str, Any]:
    """PUT /athlete/{id}/workouts/{workout_id}"""
    return await client.request(
        "PUT", f"/athlete/{athlete_id}/workouts/{workout_id}", json_data=body,
    )


async def delete_workout(client: IntervalsClient, athlete_id: str, workout_id: str) -> Any:
    """DELETE /athlete/{id}/workouts/{workout_id}"""
    return await client.request("DELETE", f"/athlete/{athlete_id}/workouts/{workout_id}")


# ── Folders ──────────────────────────────────────────────────────────────

async def list_folders(client: IntervalsClient, athlete_id: str) -> List[Dict[str, Any]]:
    """GET /athlete/{id}/folders (folders with their workouts)"""
    return await client.request("GET", f"/athlete/{athlete_id}/folders")


async def create_folder(
    client: IntervalsClient,
    athlete_id: str,
    payload: Dict[str, Any],
) -> Dict[str, Any]:
    """POST /athlete/{id}/folders"""
    return await client.request("POST", f"/athlete/{athlete_id}/folders", json_data=payload)


async def update_folder(
    client: IntervalsClient,
    athlete_id: str,
    folder_id: str,
    body: Dict[str, Any],
) -> Dict[str, Any]:
    """PUT /athlete/{id}/folders/{folder_id}"""
    return await client.request(
        "PUT", f"/athlete/{athlete_id}/folders/{folder_id}", json_data=body,
    )


async def delete_folder(client: IntervalsClient, athlete_id: str, folder_id: str) -> Any:
    """DELETE /athlete/{id}/folders/{folder_id}"""
    return await client.request("DELETE", f"/athlete/{athlete_id}/folders/{folder_id}")


async def get_folder_shared_with(
    client: IntervalsClient,
    athlete_id: str,
    folder_id: str,
) -> Any:
    """GET /athlete/{id}/folders/{folder_id}/shared-with"""
    return await client.request("GET", f"/athlete/{athlete_id}/folders/{folder_id}/shared-with")


async def update_folder_shared_with(
    client: IntervalsClient,
    athlete_id: str,
    folder_id: str,
    body: Any,
) -> Any:
    """PUT /athlete/{id}/folders/{folder_id}/shared-with"""
    return await client.request(
        "PUT", f"/athlete/{athlete_id}/folders/{folder_id}/shared-with", json_data=body,
    )
