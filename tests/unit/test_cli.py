import pytest

from credstore.app_shell import cli


@pytest.fixture
def run_cli(tmp_path, monkeypatch):
    """Run the CLI against a throwaway database, from a directory without rules.yaml."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CREDSTORE_RULES_PATH", raising=False)
    monkeypatch.delenv("CREDSTORE_DB_PATH", raising=False)
    db = str(tmp_path / "prefs.db")

    def _run(*args: str) -> int:
        return cli.main(["--db", db, *args])

    return _run


def test_migrate_fresh(run_cli, capsys):
    assert run_cli("migrate") == 0

    out = capsys.readouterr().out
    assert "Created default admin account." in out
    assert "Users: admin" in out


def test_second_migrate_is_noop(run_cli, capsys):
    run_cli("migrate")
    capsys.readouterr()

    assert run_cli("migrate") == 0
    assert "Nothing to migrate." in capsys.readouterr().out


def test_register_login_whoami_logout(run_cli, capsys):
    assert run_cli("register", "alice", "pw12", "--bio", "hello") == 0
    assert run_cli("login", "alice", "pw12", "--remember") == 0
    capsys.readouterr()

    assert run_cli("whoami") == 0
    out = capsys.readouterr().out
    assert "alice (Player)" in out
    assert "Bio: hello" in out

    assert run_cli("logout") == 0
    assert run_cli("whoami") == 1


def test_state_persists_between_invocations(run_cli, capsys):
    run_cli("complete-onboarding")
    run_cli("login", "admin", "admin", "--remember")
    capsys.readouterr()

    run_cli("start-route")

    assert capsys.readouterr().out.strip() == "home"


def test_failed_login_exit_code(run_cli, capsys):
    assert run_cli("login", "admin", "nope") == 1
    assert "invalid_credentials" in capsys.readouterr().err


def test_admin_commands(run_cli, capsys):
    assert run_cli("create-user", "bob", "pw") == 0
    assert run_cli("set-password", "bob", "pw2") == 0
    assert run_cli("delete-user", "admin") == 1
    assert run_cli("delete-user", "bob") == 0
    capsys.readouterr()

    run_cli("list-users")

    assert capsys.readouterr().out.split() == ["admin"]


def test_profile_commands(run_cli, capsys):
    run_cli("login", "admin", "admin")
    assert run_cli("set-bio", "  boss  ") == 0
    assert run_cli("regenerate-avatar") == 0
    capsys.readouterr()

    run_cli("whoami")

    out = capsys.readouterr().out
    assert "admin (Administrator)" in out
    assert "Bio: boss" in out
    assert "seed=admin" not in out


def test_explicit_missing_rules_file(run_cli, monkeypatch, tmp_path):
    monkeypatch.setenv("CREDSTORE_RULES_PATH", str(tmp_path / "missing.yaml"))

    assert run_cli("list-users") == 1


def test_rules_file_in_working_directory(run_cli, tmp_path, capsys):
    (tmp_path / "rules.yaml").write_text("bootstrap_admin:\n  username: root\n")

    run_cli("list-users")

    assert capsys.readouterr().out.split() == ["root"]
