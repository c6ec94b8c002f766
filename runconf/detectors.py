"""Build-time detectors.

A detector is a zero-argument callable returning True when the caller is in
normal runtime execution (reading the environment is safe) and False while
static initialization is still running. Lookups take the detector as an
argument; nothing here inspects call-site context on its own.
"""

import sys
from collections.abc import Callable

IsRuntime = Callable[[], bool]


def always_runtime() -> bool:
    """Detector for callers that only ever run after initialization."""
    return True


def never_runtime() -> bool:
    """Detector for code that is known to run during initialization."""
    return False


def module_initialized(module_name: str) -> IsRuntime:
    """Build a detector that is False while ``module_name`` is being imported.

    Module top-level code is the Python counterpart of compile time: a value
    read there is captured in module state for the life of the process.
    The import system flags a module spec with ``_initializing`` until its
    body has finished executing.

    Modules that are not imported at all report False. A script run as
    ``__main__`` has no spec to inspect and always reports True, even while
    its top level is running; scripts should use RuntimeGate instead.
    """

    def _is_runtime() -> bool:
        module = sys.modules.get(module_name)
        if module is None:
            return False
        spec = getattr(module, "__spec__", None)
        return not getattr(spec, "_initializing", False)

    return _is_runtime


class RuntimeGate:
    """Detector flipped explicitly by the host application.

    Starts closed (build time). The application calls ``open()`` once its
    static setup is done; ``close()`` returns to build time.
    """

    def __init__(self, is_open: bool = False) -> None:
        self._open = is_open

    def __call__(self) -> bool:
        return self._open

    @property
    def is_open(self) -> bool:
        return self._open

    def open(self) -> None:
        self._open = True

    def close(self) -> None:
        self._open = False

    def __repr__(self) -> str:
        state = "open" if self._open else "closed"
        return f"RuntimeGate({state})"
