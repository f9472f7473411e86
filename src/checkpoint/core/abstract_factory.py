from typing import Generic, Callable, TypeVar, Hashable, ClassVar


K = TypeVar("K", bound=Hashable)
T = TypeVar("T")
TypeMap = dict[K, type[T]]


class TypeAbstractFactory(Generic[K, T]):
    """
    Generic abstract factory that maps keys to class types.
    Each subclass owns its own registry.
    """

    _registry: ClassVar[TypeMap] = {}

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        cls._registry = {}

    @classmethod
    def register(cls, key: K) -> Callable[[type[T]], type[T]]:
        """
        Decorator for registering a concrete implementation type.
        """
        def wrapper(impl: type[T]) -> type[T]:
            cls._registry[key] = impl
            return impl

        return wrapper

    @classmethod
    def list_keys(cls) -> list[K]:
        return list(cls._registry.keys())

    @classmethod
    def get(cls, key: K) -> type[T] | None:
        return cls._registry.get(key)

    @classmethod
    def create(cls, key: K, /, *args, **kwargs) -> T:
        return cls._registry[key](*args, **kwargs)


class TypeKeyedFactory(TypeAbstractFactory[type, T]):
    """
    Factory keyed by a class. Lookups walk the MRO of the requested type so
    subclasses of a registered type resolve to the same implementation.
    """

    @classmethod
    def get(cls, key: type) -> type[T] | None:
        for base in getattr(key, "__mro__", (key,)):
            impl = cls._registry.get(base)
            if impl is not None:
                return impl
        return None

    @classmethod
    def supports(cls, key: type) -> bool:
        return cls.get(key) is not None
