"""
Pytest fixtures and configuration for vagrant-exec tests.
"""
from unittest.mock import MagicMock

import pytest

from vagrant_exec.interfaces.process import ProcessRunner
from vagrant_exec.models import VagrantSettings
from vagrant_exec.wrapper import Vagrant


STATUS_OUTPUT = (
    b"1700000000,web,metadata,provider,virtualbox\n"
    b"1700000000,web,provider-name,virtualbox\n"
    b"1700000000,web,state,running\n"
    b"1700000000,web,state-human-short,running\n"
    b"1700000000,web,state-human-long,The VM is running. To stop this VM%!(VAGRANT_COMMA) you can run `vagrant halt` to\\nshut it down forcefully.\n"
    b"1700000000,db,metadata,provider,libvirt\n"
    b"1700000000,db,provider-name,libvirt\n"
    b"1700000000,db,state,not_created\n"
    b"1700000000,,ui,info,Current machine states:\n"
)

VERSION_OUTPUT = (
    b"1700000000,,ui,info,Installed Version: 2.3.0\n"
    b"1700000000,,version-installed,2.3.0\n"
    b"1700000000,,version-latest,2.4.1\n"
    b"1700000000,,ui,info,Latest Version: 2.4.1\n"
)

PLUGIN_OUTPUT = (
    b"1700000000,,ui,info,vagrant-libvirt (0.12.2%!(VAGRANT_COMMA) global)\n"
    b"1700000000,,ui,info,  - Version Constraint: > 0\n"
    b"1700000000,,ui,info,vagrant-share (2.0.0%!(VAGRANT_COMMA) local)\n"
)


@pytest.fixture
def settings():
    """Settings pinned to the plain `vagrant` executable."""
    return VagrantSettings(executable="vagrant")


@pytest.fixture
def mock_runner():
    """A ProcessRunner double that returns empty output."""
    runner = MagicMock(spec=ProcessRunner)
    runner.execute.return_value = b""
    return runner


@pytest.fixture
def mock_logger():
    logger = MagicMock()
    logger.bind.return_value = logger
    return logger


@pytest.fixture
def vagrant(settings, mock_runner, mock_logger):
    """A Vagrant client wired to the mock runner and logger."""
    return Vagrant(settings=settings, runner=mock_runner, logger=mock_logger)


@pytest.fixture
def status_output():
    return STATUS_OUTPUT


@pytest.fixture
def version_output():
    return VERSION_OUTPUT


@pytest.fixture
def plugin_output():
    return PLUGIN_OUTPUT
