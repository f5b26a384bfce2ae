import copy
from abc import ABC, abstractmethod
from typing import Any


class BackendClient(ABC):
    """
    Storage for the data this service owns. Handed to the services
    explicitly; the API wires it in through `get_backend_client`.
    """

    @abstractmethod
    def get_availability_schedule(self, trainer_id: str) -> dict[str, Any] | None:
        ...

    @abstractmethod
    def update_availability_schedule(
        self,
        trainer_id: str,
        availability_schedule: dict[str, Any]
    ) -> None:
        ...

    @abstractmethod
    def get_system_default_visibility(self) -> list[dict[str, str]]:
        ...

    @abstractmethod
    def save_system_default_visibility(
        self,
        content_type: str,
        stage_group: str,
        visibility_state: str
    ) -> None:
        ...


class InMemoryBackendClient(BackendClient):

    def __init__(self):
        self._availability_schedules: dict[str, dict[str, Any]] = {}
        self._system_default_visibility: dict[tuple[str, str], str] = {}

    def get_availability_schedule(self, trainer_id: str) -> dict[str, Any] | None:
        schedule = self._availability_schedules.get(trainer_id)
        return copy.deepcopy(schedule)

    def update_availability_schedule(
        self,
        trainer_id: str,
        availability_schedule: dict[str, Any]
    ) -> None:
        # Whole object replaced, last write wins
        self._availability_schedules[trainer_id] = copy.deepcopy(
            availability_schedule)

    def get_system_default_visibility(self) -> list[dict[str, str]]:
        return [
            {
                "content_type": content_type,
                "stage_group": stage_group,
                "visibility_state": visibility_state,
            }
            for (content_type, stage_group), visibility_state
            in self._system_default_visibility.items()
        ]

    def save_system_default_visibility(
        self,
        content_type: str,
        stage_group: str,
        visibility_state: str
    ) -> None:
        self._system_default_visibility[(content_type, stage_group)] = \
            visibility_state


_backend_client = InMemoryBackendClient()


def get_backend_client() -> BackendClient:
    return _backend_client
