from ..calendar_api.search_filters import list_departments
from .common import load_selected_tasks


def handle_departments(args):
    """List the departments that own at least one task."""
    departments = list_departments(load_selected_tasks(args))
    if not departments:
        print("No departments found.")
        return
    print("Departments:")
    for name in departments:
        print(f"- {name}")
