import logging
from typing import Callable, List, Sequence

from config import get_settings
from record_store import RecordStore
from subscriber_schema import Subscriber
from subscriber_service import (
    attach_listeners, create, edit, internet_limit_notifier, list_all, lookup_plan_by_index,
)
from tariff_catalog import PlanCatalog, default_catalog
from utils import parse_index, parse_usage

logger = logging.getLogger(__name__)
if not logger.hasHandlers():
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

InputFunction = Callable[[str], str]

DEFAULT_LISTENERS = (internet_limit_notifier,)


def view_users(subscribers: Sequence[Subscriber]) -> None:
    users = list_all(subscribers)
    if not users:
        print("No users found.")
        return
    print("\nAll users:")
    for index, user in enumerate(users, start=1):
        plan_name = user.plan.name if user.plan else None
        print(f"{index}. {user.name} ({user.phone_number}) - Plan: {plan_name}, Internet used: {user.data_used} GB")


def print_plans(catalog: PlanCatalog) -> None:
    for index, plan in enumerate(catalog, start=1):
        print(f"{index}. {plan.name}")


def add_user(catalog: PlanCatalog, read: InputFunction = input) -> Subscriber | None:
    name = read("Enter the name of the new user: ")
    phone_number = read("Enter the phone number of the new user (e.g., +38 099 123 4567): ")
    if not name.strip() or not phone_number.strip():
        print("Name and phone number are required.")
        return None

    internet_used = parse_usage(read("Enter the number of GB used by the user: "))
    if internet_used is None:
        print("Invalid number of GB.")
        return None

    print("Choose a tariff plan for the user:")
    print_plans(catalog)
    choice = parse_index(read("Plan number: "))
    plan = lookup_plan_by_index(catalog, choice) if choice is not None else None
    if plan is None:
        print("Invalid plan number.")
        return None

    return create(name, phone_number, plan, internet_used, listeners=DEFAULT_LISTENERS)


def edit_user(subscribers: Sequence[Subscriber], catalog: PlanCatalog, read: InputFunction = input) -> Subscriber | None:
    view_users(subscribers)
    user_index = parse_index(read("Enter the number of the user to edit: "))
    if user_index is None or not 1 <= user_index <= len(subscribers):
        print("Invalid user number.")
        return None

    user = subscribers[user_index - 1]
    print(f"Editing user: {user.name}")

    new_phone_number = read(f"Enter new phone number (current: {user.phone_number}): ")

    print(f"Choose new tariff plan (current: {user.plan.name if user.plan else None}):")
    print_plans(catalog)
    choice = parse_index(read("Plan number (empty to keep): "))
    new_plan = lookup_plan_by_index(catalog, choice) if choice is not None else None

    new_usage = parse_usage(read(f"Enter new internet usage in GB (current: {user.data_used} GB): "))

    return edit(user, new_phone_number=new_phone_number, new_plan=new_plan, new_usage=new_usage)


def run(store: RecordStore, read: InputFunction = input) -> List[Subscriber]:
    users = store.load()
    attach_listeners(users, DEFAULT_LISTENERS)

    try:
        menu_loop(users, store, read)
    except EOFError:
        logger.info("Ввод завершён, выход из программы")

    return users


def menu_loop(users: List[Subscriber], store: RecordStore, read: InputFunction) -> None:
    while True:
        print("\n--- Menu ---")
        print("1. View all users")
        print("2. Add new user")
        print("3. Edit user")
        print("4. Exit")
        choice = read("Enter your choice: ").strip()

        if choice == "1":
            view_users(users)
        elif choice == "2":
            new_user = add_user(store.catalog, read)
            if new_user is not None:
                users.append(new_user)
                if store.save(users):
                    print("New user added successfully.")
                else:
                    print("Failed to save users.")
        elif choice == "3":
            if edit_user(users, store.catalog, read) is not None:
                if store.save(users):
                    print("User data updated successfully.")
                else:
                    print("Failed to save users.")
        elif choice == "4":
            print("Exiting program...")
            return
        else:
            print("Invalid choice. Please enter a valid option.")


def main() -> None:
    settings = get_settings()
    logging.getLogger().setLevel(settings.log_level.upper())
    store = RecordStore(settings.get_users_file_path(), default_catalog())
    run(store)


if __name__ == "__main__":
    main()
