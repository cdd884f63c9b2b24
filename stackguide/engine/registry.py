"""Registry of technology modules."""

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from stackguide.core.exceptions.errors import DuplicateModuleError
from stackguide.core.logger.logger import get_logger
from stackguide.models.module import ModuleKind

if TYPE_CHECKING:
    from stackguide.modules.base import BaseModule


class ModuleRegistry:
    """Ordered collection of modules keyed by id.

    Registration order is significant: it breaks ties everywhere the engine
    needs a deterministic order. The registry is built once, passed to its
    consumers, and only read afterwards.
    """

    def __init__(self, modules: Iterable["BaseModule"] = ()) -> None:
        self.logger = get_logger(self.__class__.__name__)
        self._modules: dict[str, "BaseModule"] = {}
        for module in modules:
            self.register(module)

    def register(self, module: "BaseModule") -> None:
        """Add a module.

        Args:
            module: Module instance with a unique ``id``.

        Raises:
            DuplicateModuleError: If a module with the same id is registered.
        """
        if module.id in self._modules:
            raise DuplicateModuleError(
                module.id,
                details={"existing": self._modules[module.id].__class__.__name__},
            )
        self._modules[module.id] = module
        self.logger.debug(f"Registered module {module.id} ({module.kind.value})")

    def get(self, module_id: str) -> "BaseModule | None":
        return self._modules.get(module_id)

    def get_all(self) -> Iterator["BaseModule"]:
        """Iterate over all modules in registration order.

        Each call returns a fresh iterator.
        """
        return iter(list(self._modules.values()))

    def get_by_kind(self, kind: ModuleKind) -> list["BaseModule"]:
        return [m for m in self._modules.values() if m.kind == kind]

    def index_of(self, module_id: str) -> int:
        """Registration position of a module id.

        Raises:
            KeyError: If the id is not registered.
        """
        for index, registered in enumerate(self._modules):
            if registered == module_id:
                return index
        raise KeyError(module_id)

    def __iter__(self) -> Iterator["BaseModule"]:
        return self.get_all()

    def __len__(self) -> int:
        return len(self._modules)

    def __contains__(self, module_id: object) -> bool:
        return module_id in self._modules
