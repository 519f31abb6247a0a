import nox

PYTHON_VERSIONS = ["3.11", "3.12", "3.13", "3.14"]


def _install(session: nox.Session) -> None:
    """Install the project with all extras into the nox virtualenv."""
    session.run(
        "poetry",
        "install",
        "--all-extras",
        external=True,
    )


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    """Run full test suite across Python versions."""
    _install(session)
    session.run("pytest")


@nox.session(python=PYTHON_VERSIONS)
def tests_domain(session: nox.Session) -> None:
    """Run domain-layer tests only (no web stack required)."""
    _install(session)
    session.run(
        "pytest",
        "tests/shared/",
        "tests/ordering/domain/",
    )


@nox.session(python=PYTHON_VERSIONS[-1])
def tests_bdd(session: nox.Session) -> None:
    """Run the Gherkin scenarios."""
    _install(session)
    session.run("pytest", "-m", "bdd")


@nox.session(python=PYTHON_VERSIONS[-1])
def loadtest(session: nox.Session) -> None:
    """Run a short headless checkout load test against a running server.

    Pass the server URL after ``--``, e.g. ``nox -s loadtest -- http://localhost:3000``.
    """
    _install(session)
    host = session.posargs[0] if session.posargs else "http://localhost:3000"
    session.run(
        "locust",
        "-f",
        "loadtests/locustfile.py",
        "CheckoutUser",
        "--headless",
        "-u",
        "20",
        "-r",
        "5",
        "-t",
        "60s",
        "--host",
        host,
    )
