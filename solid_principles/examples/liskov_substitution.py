"""Liskov Substitution Principle example.

If B is a subtype of A, an object of type A can be replaced with an object
of type B without breaking the program.
"""
import logging


logger = logging.getLogger(__name__)


class Bird:
    """Base bird with a name and a single behavior."""

    def __init__(self, name: str):
        if not name:
            raise ValueError("name is required")
        self.name = name

    def fly(self) -> None:
        print(f"{self.name} is flying.")


class Parrot(Bird):
    """A bird that flies and talks."""

    def fly(self) -> None:
        print(f"{self.name} is flying and talking!")


class Penguin(Bird):
    """A bird that cannot fly, and says so instead of failing."""

    def fly(self) -> None:
        print(f"{self.name} cannot fly.")


def make_bird_fly(bird: Bird) -> None:
    """
    Make any bird fly.

    Works for every ``Bird`` subtype without checking which one it got.

    Args:
        bird: Bird instance
    """
    bird.fly()


# Violation: a subtype that breaks the base class contract.

class FlightNotSupportedError(Exception):
    """Raised by a bird that refuses the ``fly`` contract."""


class BrokenPenguin(Bird):
    """Penguin that raises from ``fly``, so it cannot stand in for a Bird."""

    def fly(self) -> None:
        raise FlightNotSupportedError(f"{self.name} cannot fly")


def guarded_make_bird_fly(bird: Bird) -> None:
    """
    Driver the violation forces on callers.

    Every call has to be guarded because some subtypes throw.

    Args:
        bird: Bird instance
    """
    try:
        bird.fly()
    except FlightNotSupportedError as e:
        logger.warning(f"{type(bird).__name__} broke the Bird contract: {e}")
        print(f"Error: {e}")


def violation_main() -> None:
    """Run the version whose penguin breaks substitution."""
    guarded_make_bird_fly(Parrot("Parrot"))
    guarded_make_bird_fly(BrokenPenguin("Penguin"))


def main() -> None:
    """Fly a parrot and a penguin through the same driver."""
    parrot = Parrot("Parrot")
    penguin = Penguin("Penguin")

    make_bird_fly(parrot)
    make_bird_fly(penguin)


if __name__ == "__main__":
    main()
