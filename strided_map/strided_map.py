from typing import Any


class Config:
    _instance = None

    def __new__(cls, *args: Any, **kwargs: Any) -> "Config":
        if cls._instance is None:
            cls._instance = super(Config, cls).__new__(cls, *args, **kwargs)
        return cls._instance

    def __init__(self) -> None:
        if not hasattr(self, "_initialized"):
            self._initialized = True  # Prevents reinitialization
            self._use_jit = False

    @property
    def use_jit(self) -> bool:
        """
        Whether numpy buffers with a numba-compiled transform are routed
        through the compiled kernel
        """
        return self._use_jit

    @use_jit.setter
    def use_jit(self, use_jit) -> None:
        self._use_jit = bool(use_jit)

    def set_use_jit(self, use_jit: bool) -> None:
        self._use_jit = bool(use_jit)


class Session:
    """
    Lightweight context manager to scope Config settings per run.

    Example:
        with Session(use_jit=True):
            ...
    Restores previous Config values on exit so tests/runs stay isolated.
    """

    def __init__(self, *, use_jit: bool | None = None) -> None:
        cfg = Config()
        self._prev = {"use_jit": cfg.use_jit}
        self._use_jit = use_jit
        self._cfg = cfg

    def __enter__(self) -> "Config":
        if self._use_jit is not None:
            self._cfg.set_use_jit(self._use_jit)
        return self._cfg

    def __exit__(self, exc_type, exc, tb) -> None:
        self._cfg.set_use_jit(self._prev["use_jit"])
