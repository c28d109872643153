"""Shared test fixtures for compose_yml tests."""
import pytest

from compose_yml.core.config import set_settings
from compose_yml.interpolation.environment import Environment, MappingEnvironment


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Make every test start from default settings."""
    for name in ("COMPOSE_YML_VALIDATE", "COMPOSE_YML_ENV_FILE", "COMPOSE_YML_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    set_settings(None)
    yield
    set_settings(None)


@pytest.fixture
def env():
    """A small fixed environment."""
    return MappingEnvironment({
        "FOO": "foo",
        "IMAGE": "nginx",
        "TAG": "1.25",
        "SIZE": "512m",
        "PORT": "8080",
    })


class ExplodingEnvironment(Environment):
    """Fails the test if anything looks up a variable."""

    def var(self, name):
        raise AssertionError(f"unexpected lookup of {name}")


@pytest.fixture
def exploding_env():
    return ExplodingEnvironment()


@pytest.fixture
def sample_compose():
    """A compose file already in canonical form."""
    return """\
version: "2.1"
services:
  web:
    build: ./web
    image: example/web:1.0
    command: ["bundle", "exec", "thin", "-p", "3000"]
    depends_on:
      - db
    environment:
      RAILS_ENV: production
    ports:
      - "3000:3000"
    volumes:
      - ./web:/app:ro
      - data:/var/lib/data
    networks:
      - front
    restart: unless-stopped
    mem_limit: 512m
  db:
    image: postgres
    healthcheck:
      test: ["CMD", "pg_isready"]
      interval: 30s
volumes:
  data:
networks:
  front:
    driver: bridge
"""


@pytest.fixture
def compose_path(tmp_path, sample_compose):
    """Write the sample compose file to disk."""
    path = tmp_path / "docker-compose.yml"
    path.write_text(sample_compose)
    return path
