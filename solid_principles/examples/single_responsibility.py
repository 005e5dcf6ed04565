"""Single Responsibility Principle example.

A class should have only one reason to change.
"""
from dataclasses import dataclass

from solid_principles.utils.number_format import format_number


def _validate_employee(name: str, hourly_rate: float, hours_worked: int) -> None:
    if not name:
        raise ValueError("name is required")
    if hourly_rate < 0:
        raise ValueError("hourly_rate must be non-negative")
    if hours_worked < 0:
        raise ValueError("hours_worked must be non-negative")


# Violation: one class computes pay and persists itself.

@dataclass
class EmployeeRecord:
    """Employee that also knows how to save itself."""

    name: str
    hourly_rate: float
    hours_worked: int

    def __post_init__(self):
        _validate_employee(self.name, self.hourly_rate, self.hours_worked)

    def calculate_salary(self) -> float:
        return self.hourly_rate * self.hours_worked

    def save_to_database(self) -> None:
        print(f"Saving {self.name} to the database.")


# Corrected: payroll and persistence live in separate classes.

@dataclass(frozen=True)
class Employee:
    """Domain entity representing an hourly employee."""

    name: str
    hourly_rate: float
    hours_worked: int

    def __post_init__(self):
        """Validate employee entity."""
        _validate_employee(self.name, self.hourly_rate, self.hours_worked)

    def calculate_salary(self) -> float:
        """
        Calculate the salary for the hours worked.

        Returns:
            Hourly rate times hours worked
        """
        return self.hourly_rate * self.hours_worked


class Database:
    """Persistence for employees. Only acknowledges the save."""

    def save_to_database(self, employee: Employee) -> None:
        """
        Save a previously built employee.

        Args:
            employee: Employee to save
        """
        print(f"Saving {employee.name} to the database.")


def violation_main() -> None:
    """Run the version where the employee does everything."""
    employee = EmployeeRecord("John", 20.0, 40)
    print(f"Salary: {format_number(employee.calculate_salary())}")
    employee.save_to_database()


def main() -> None:
    """Compute a salary, then save the employee through a separate class."""
    employee = Employee("John", 20.0, 40)
    db = Database()

    print(f"Salary: {format_number(employee.calculate_salary())}")
    db.save_to_database(employee)


if __name__ == "__main__":
    main()
