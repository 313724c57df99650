"""
Console Menu
Interactive text menu over an employee registry.
Run with: python -m employee_registry.console
"""
from typing import Callable, List, Optional
from employee_registry.config.settings import CONSOLE_IMPORT_MAX, configure_logging
from employee_registry.models.employee import Employee
from employee_registry.models.errors import RegistryError, ValidationError
from employee_registry.repositories.employee_repository import EmployeeRegistry
from employee_registry.services.import_service import ImportSource, import_employees
from employee_registry.services.random_user_service import RandomUserClient

BOX_WIDTH = 60

MENU_OPTIONS = [
    ("1", "Add a new employee"),
    ("2", "List all employees"),
    ("3", "Delete employees by name"),
    ("4", "Import employees from external API"),
    ("5", "Search employees by name"),
    ("6", "Update an employee by ID"),
    ("7", "Delete an employee by ID"),
    ("0", "Exit"),
]


def _box_top() -> str:
    return "╔" + "═" * BOX_WIDTH + "╗"


def _box_sep() -> str:
    return "╠" + "═" * BOX_WIDTH + "╣"


def _box_bottom() -> str:
    return "╚" + "═" * BOX_WIDTH + "╝"


def _box_line(text: str) -> str:
    if len(text) > BOX_WIDTH - 2:
        text = text[: BOX_WIDTH - 5] + "..."
    return "║ " + text.ljust(BOX_WIDTH - 1) + "║"


def render_employee_card(employee: Employee, title: str) -> List[str]:
    """Boxed card for one employee; contact details only when present."""
    lines = [
        _box_top(),
        _box_line(title),
        _box_sep(),
        _box_line(f"ID: {employee.id}"),
        _box_line(f"Name: {employee.name}"),
        _box_line(f"Age: {employee.age}"),
        _box_line(f"Salary: {employee.salary}"),
    ]
    if employee.has_contact_info:
        lines.append(_box_sep())
        lines.append(_box_line("CONTACT DETAILS"))
        if employee.email:
            lines.append(_box_line(f"Email: {employee.email}"))
        if employee.phone:
            lines.append(_box_line(f"Phone: {employee.phone}"))
        if employee.photo_url:
            lines.append(_box_line(f"Photo: {employee.photo_url}"))
    lines.append(_box_bottom())
    return lines


def parse_age(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise ValidationError("age must be a whole number between 1 and 120")


def parse_salary(text: str) -> float:
    try:
        return float(text.strip())
    except ValueError:
        raise ValidationError("salary must be a number")


class ConsoleApp:
    """Menu loop that translates console input into registry calls."""

    def __init__(
        self,
        registry: EmployeeRegistry,
        import_source: ImportSource,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        self.registry = registry
        self.import_source = import_source
        self._input = input_fn
        self._print = output_fn
        self._actions = {
            "1": self.add_employee,
            "2": self.list_employees,
            "3": self.delete_by_name,
            "4": self.import_employees,
            "5": self.search_employees,
            "6": self.update_employee,
            "7": self.delete_by_id,
        }

    def run(self) -> None:
        """Show the menu until the user exits (option 0 or end of input)."""
        self._print_banner()
        while True:
            self._print_menu()
            try:
                choice = self._input("\nSelect an option: ").strip()
            except EOFError:
                choice = "0"

            if choice == "0":
                self._print("\nThank you for using the system!")
                return

            action = self._actions.get(choice)
            if action is None:
                self._print("\nInvalid option. Please try again.")
                continue

            try:
                action()
            except EOFError:
                self._print("\nThank you for using the system!")
                return
            except RegistryError as e:
                self._print(f"\nError: {e.reason}")

    def _print_banner(self) -> None:
        self._print(_box_top())
        self._print("║" + "EMPLOYEE MANAGEMENT SYSTEM".center(BOX_WIDTH) + "║")
        self._print(_box_bottom())

    def _print_menu(self) -> None:
        self._print("")
        self._print(_box_top())
        for key, label in MENU_OPTIONS:
            self._print(_box_line(f"{key}. {label}"))
        self._print(_box_sep())
        self._print(_box_line("Extra employee data comes from the Random User API"))
        self._print(_box_bottom())

    def _show_employees(self, employees: List[Employee], title: str) -> None:
        for index, employee in enumerate(employees, start=1):
            for line in render_employee_card(employee, f"{title} #{index}"):
                self._print(line)
            self._print("")

    def add_employee(self) -> None:
        self._print("\n=== ADD NEW EMPLOYEE ===")
        name = self._input("Full name: ")
        age = parse_age(self._input("Age: "))
        salary = parse_salary(self._input("Salary: "))
        email = self._input("Email (optional): ")
        phone = self._input("Phone (optional): ")

        employee = self.registry.add(name, age, salary, email, phone)
        self._print("\nEmployee added successfully:")
        for line in render_employee_card(employee, "NEW EMPLOYEE"):
            self._print(line)

    def list_employees(self) -> None:
        self._print("\n=== EMPLOYEE LIST ===")
        employees = self.registry.list()
        if not employees:
            self._print("No employees registered.")
            return
        self._print(f"Total employees: {len(employees)}\n")
        self._show_employees(employees, "EMPLOYEE")

    def search_employees(self) -> None:
        self._print("\n=== SEARCH EMPLOYEES BY NAME ===")
        query = self._input("Name to search: ")
        employees = self.registry.find_by_name(query)

        self._print(f'\nSearch results for "{query}":')
        if not employees:
            self._print("No employees found with that name.")
            return
        self._print(f"Found {len(employees)} employee(s):\n")
        self._show_employees(employees, "RESULT")

    def delete_by_name(self) -> None:
        self._print("\n=== DELETE EMPLOYEES BY NAME ===")
        self._print("Warning: every employee whose name contains the text will be deleted.")
        query = self._input("Name of the employee(s) to delete: ")
        if self.registry.delete_by_name(query):
            self._print(f'\nEmployee(s) matching "{query}" deleted successfully.')
        else:
            self._print(f'\nNo employee found with name "{query}".')

    def delete_by_id(self) -> None:
        self._print("\n=== DELETE EMPLOYEE BY ID ===")
        employee_id = self._input("Employee ID: ").strip()
        if self.registry.delete_by_id(employee_id):
            self._print(f"\nEmployee {employee_id} deleted successfully.")
        else:
            self._print(f"\nNo employee found with ID {employee_id}.")

    def update_employee(self) -> None:
        self._print("\n=== UPDATE EMPLOYEE ===")
        employee_id = self._input("Employee ID: ").strip()
        current = self.registry.find_by_id(employee_id)
        if current is None:
            self._print(f"\nNo employee found with ID {employee_id}.")
            return

        self._print("Leave a field blank to keep its current value.")
        fields = {}
        name = self._input(f"Full name [{current.name}]: ")
        if name.strip():
            fields["name"] = name
        age = self._input(f"Age [{current.age}]: ")
        if age.strip():
            fields["age"] = parse_age(age)
        salary = self._input(f"Salary [{current.salary}]: ")
        if salary.strip():
            fields["salary"] = parse_salary(salary)
        for key, label, value in (
            ("email", "Email", current.email),
            ("phone", "Phone", current.phone),
            ("photo", "Photo URL", current.photo_url),
        ):
            text = self._input(f"{label} [{value}]: ")
            if text.strip():
                fields[key] = text.strip()

        employee = self.registry.update_by_id(employee_id, fields)
        self._print("\nEmployee updated successfully:")
        for line in render_employee_card(employee, "UPDATED EMPLOYEE"):
            self._print(line)

    def import_employees(self) -> None:
        self._print("\n=== IMPORT EMPLOYEES FROM API ===")
        text = self._input(f"Number of employees to import (1-{CONSOLE_IMPORT_MAX}): ")
        try:
            count = int(text.strip())
        except ValueError:
            count = 0
        if count < 1 or count > CONSOLE_IMPORT_MAX:
            raise ValidationError(f"count must be a number between 1 and {CONSOLE_IMPORT_MAX}")

        self._print("\nFetching data from the API...")
        added = import_employees(self.registry, self.import_source, count)
        self._print(f"{len(added)} employees imported successfully!")

        self._print("\nImported employees summary:")
        for index, employee in enumerate(added, start=1):
            self._print(f"\n--- Employee #{index} ---")
            self._print(f"Name: {employee.name}")
            self._print(f"Age: {employee.age}")
            self._print(f"Salary: {employee.salary}")
            self._print(f"Email: {employee.email}")

        answer = self._input("\nShow full details of all employees? (y/N): ")
        if answer.strip().lower() == "y":
            self.list_employees()


def main(registry: Optional[EmployeeRegistry] = None) -> None:
    configure_logging()
    console = ConsoleApp(
        registry if registry is not None else EmployeeRegistry(),
        RandomUserClient(),
    )
    console.run()


if __name__ == "__main__":
    main()
