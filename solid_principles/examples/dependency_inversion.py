"""Dependency Inversion Principle example.

High-level modules should not depend on low-level modules. Both should
depend on abstractions, and abstractions should not depend on details.
"""
import logging
from abc import ABC, abstractmethod


logger = logging.getLogger(__name__)

REPORT_DATA = "Report Data"


# Violation: the report generator builds its own file saver.

class FileSaver:
    """Low-level module the coupled generator is hard-wired to."""

    def save_to_file(self, data: str) -> None:
        print(f"Saving data to a file: {data}")


class CoupledReportGenerator:
    """
    Report generator that depends directly on ``FileSaver``.

    Saving to a database instead would mean editing this class.
    """

    def __init__(self):
        self._file_saver = FileSaver()

    def generate_report(self) -> None:
        self._file_saver.save_to_file(REPORT_DATA)


# Corrected: both sides depend on IDataSaver.

class IDataSaver(ABC):
    """Interface for anything that can persist report data."""

    @abstractmethod
    def save_data(self, data: str) -> None:
        """
        Save data to the underlying medium.

        Args:
            data: Payload to save
        """
        pass


class FileManager(IDataSaver):
    """Saves data to a file."""

    def save_data(self, data: str) -> None:
        print(f"Saving data to a file: {data}")


class DatabaseManager(IDataSaver):
    """Saves data to a database."""

    def save_data(self, data: str) -> None:
        print(f"Saving data to a database: {data}")


class ReportGenerator:
    """
    High-level module that depends only on the ``IDataSaver`` abstraction.

    The saver is injected, so a new medium (cloud storage, a queue) is a new
    ``IDataSaver`` implementation and this class stays untouched.
    """

    def __init__(self, data_saver: IDataSaver):
        """
        Initialize generator with its saver (Dependency Injection).

        Args:
            data_saver: Data saver implementation
        """
        if not isinstance(data_saver, IDataSaver):
            raise ValueError("data_saver must implement IDataSaver")
        self.data_saver = data_saver

    def generate_report(self) -> None:
        """Build the report and hand it to the saver exactly once."""
        logger.debug(f"Generating report with {type(self.data_saver).__name__}")
        self.data_saver.save_data(REPORT_DATA)


def violation_main() -> None:
    """Run the tightly coupled version."""
    report = CoupledReportGenerator()
    report.generate_report()


def main() -> None:
    """Run the same report generator with a file saver, then a database saver."""
    report_with_file = ReportGenerator(FileManager())
    report_with_file.generate_report()

    report_with_db = ReportGenerator(DatabaseManager())
    report_with_db.generate_report()


if __name__ == "__main__":
    main()
