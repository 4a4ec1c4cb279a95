from main import add_user, edit_user, run
from record_store import RecordStore
from subscriber_service import create
from tariff_catalog import PlanCatalog


def scripted(*answers):
    remaining = iter(answers)

    def read(prompt: str = "") -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return read


def test_add_user_then_exit_persists(store: RecordStore, store_path, capsys):
    users = run(store, scripted("2", "Ivan", "+38 099 123 4567", "1.5", "2", "4"))

    assert [(u.name, u.plan.name, u.data_used) for u in users] == [("Ivan", "Premium", 1.5)]
    assert store_path.read_text(encoding="utf-8") == "Ivan|+38 099 123 4567|Premium|1.5\n"
    assert "New user added successfully." in capsys.readouterr().out


def test_add_user_with_bad_number_is_aborted(catalog: PlanCatalog, capsys):
    assert add_user(catalog, scripted("Ivan", "123", "lots")) is None
    assert "Invalid number of GB." in capsys.readouterr().out


def test_add_user_with_bad_plan_is_aborted(catalog: PlanCatalog, capsys):
    assert add_user(catalog, scripted("Ivan", "123", "1.0", "9")) is None
    assert "Invalid plan number." in capsys.readouterr().out


def test_add_user_requires_name(catalog: PlanCatalog):
    assert add_user(catalog, scripted("", "123")) is None


def test_aborted_add_does_not_save(store: RecordStore, store_path):
    users = run(store, scripted("2", "Ivan", "123", "abc", "4"))

    assert users == []
    assert not store_path.exists()


def test_edit_user_applies_changes(catalog: PlanCatalog):
    users = [create("Ivan", "123", catalog.default, 1.0)]

    edited = edit_user(users, catalog, scripted("1", "456", "3", "1000"))

    assert edited is users[0]
    assert (edited.phone_number, edited.plan.name, edited.data_used) == ("456", "Turbo", 1000.0)


def test_edit_user_bad_values_mean_no_change(catalog: PlanCatalog):
    users = [create("Ivan", "123", catalog.default, 1.0)]

    edit_user(users, catalog, scripted("1", "", "x", "oops"))

    assert (users[0].phone_number, users[0].plan.name, users[0].data_used) == ("123", "Basic", 1.0)


def test_edit_user_invalid_index(catalog: PlanCatalog, capsys):
    users = [create("Ivan", "123", catalog.default)]

    assert edit_user(users, catalog, scripted("5")) is None
    assert "Invalid user number." in capsys.readouterr().out


def test_edit_persists_loaded_users(store: RecordStore, store_path):
    store_path.write_text("Ivan|123|Basic|1.0\nOlga|456|Premium|2.0\n", encoding="utf-8")

    run(store, scripted("3", "2", "", "", "7.5", "4"))

    assert store_path.read_text(encoding="utf-8").splitlines() == [
        "Ivan|123|Basic|1.0",
        "Olga|456|Premium|7.5",
    ]


def test_invalid_choice_and_listing(store: RecordStore, capsys):
    run(store, scripted("9", "1", "4"))

    out = capsys.readouterr().out
    assert "Invalid choice. Please enter a valid option." in out
    assert "No users found." in out
    assert "Exiting program..." in out


def test_end_of_input_stops_loop(store: RecordStore):
    assert run(store, scripted()) == []
