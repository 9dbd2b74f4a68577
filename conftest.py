import pathlib


def pytest_ignore_collect(collection_path, config):
    # Accept both py.path.local (pytest<9) and pathlib.Path (pytest>=9)
    p = pathlib.Path(str(collection_path))
    # Ignore virtualenvs, build output and run logs
    for part in p.parts:
        if part in {".venv", "dist", "build", "logs"}:
            return True
    return False
