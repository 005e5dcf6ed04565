"""Interface Segregation Principle example.

Clients should not be forced to implement interfaces they don't use. A large
interface is split into smaller, more specific ones.
"""
from abc import ABC, abstractmethod


# Violation: one fat interface for every worker.

class Worker(ABC):
    """Fat interface forcing both ``work`` and ``eat`` on every worker."""

    @abstractmethod
    def work(self) -> None:
        pass

    @abstractmethod
    def eat(self) -> None:
        pass


class FatHuman(Worker):
    def work(self) -> None:
        print("Human is working")

    def eat(self) -> None:
        print("Human is eating")


class FatRobot(Worker):
    """Robot that has to implement ``eat`` even though it never eats."""

    def work(self) -> None:
        print("Robot is working")

    def eat(self) -> None:
        print("Robot is charging, not eating!")


# Corrected: one narrow interface per capability.

class IWork(ABC):
    """Interface for working."""

    @abstractmethod
    def work(self) -> None:
        pass


class IEat(ABC):
    """Interface for eating."""

    @abstractmethod
    def eat(self) -> None:
        pass


class Human(IWork, IEat):
    """Humans work and eat."""

    def work(self) -> None:
        print("Human is working")

    def eat(self) -> None:
        print("Human is eating")


class Robot(IWork):
    """Robots work and don't eat, so they only implement ``IWork``."""

    def work(self) -> None:
        print("Robot is working")


def violation_main() -> None:
    """Run the fat-interface version."""
    human = FatHuman()
    robot = FatRobot()

    human.work()
    human.eat()

    robot.work()
    robot.eat()


def main() -> None:
    """Run the segregated-interface version."""
    human = Human()
    robot = Robot()

    human.work()
    human.eat()

    robot.work()


if __name__ == "__main__":
    main()
