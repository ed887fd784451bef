from invoke import task
from pathlib import Path

# Get project root directory
PROJECT_ROOT = Path(__file__).parent.absolute()


def project_relative(path):
    """Convert a relative path to an absolute path relative to the project root."""
    return str(PROJECT_ROOT / path)


@task
def update(c):
    """Update all dependencies to their latest versions using poetry."""
    c.run("poetry update")


@task
def up(c):
    """Alias for update - update all dependencies to their latest versions."""
    update(c)


@task
def shell(c):
    """Start Django shell."""
    manage_py = project_relative("manage.py")
    c.run(f"python {manage_py} shell")


@task
def test(c, path=None):
    """Run Django tests. Optionally specify a specific test path."""
    manage_py = project_relative("manage.py")
    settings = "--settings=hpl.test_settings"
    if path:
        c.run(f"python {manage_py} test {settings} {path}")
    else:
        c.run(f"python {manage_py} test {settings} hpl")


@task
def seed(c, output="snapshot.json", teams=6, seed=None, completion=0.5, playoffs=False):
    """Write a seeded league snapshot to a JSON file."""
    manage_py = project_relative("manage.py")
    args = f"{output} --teams {teams} --completion {completion}"
    if seed is not None:
        args += f" --seed {seed}"
    if playoffs:
        args += " --playoffs"
    c.run(f"python {manage_py} seed_snapshot {args}")


@task
def standings(c, snapshot="snapshot.json", tournament=None, fixtures=False):
    """Print the standings table of a snapshot."""
    manage_py = project_relative("manage.py")
    args = snapshot
    if tournament:
        args += f" --tournament {tournament}"
    if fixtures:
        args += " --fixtures"
    c.run(f"python {manage_py} show_standings {args}")


@task
def schedule(c, snapshot="snapshot.json", tournament=None, date=None):
    """Print one day's matches of a snapshot with line-ups masked until reveal."""
    manage_py = project_relative("manage.py")
    args = snapshot
    if tournament:
        args += f" --tournament {tournament}"
    if date:
        args += f" --date {date}"
    c.run(f"python {manage_py} show_schedule {args}")
