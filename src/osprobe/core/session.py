"""Single-command SSH sessions using Paramiko."""

from __future__ import annotations

import logging

import paramiko

from osprobe.config import SSHConfig

logger = logging.getLogger(__name__)


class SessionError(Exception):
    """Raised when a remote command could not be run to completion."""


class DialError(SessionError):
    pass


class SessionOpenError(SessionError):
    pass


class CommandError(SessionError):
    pass


class _TransientTrustPolicy(paramiko.MissingHostKeyPolicy):
    """Accept unknown host keys for the lifetime of the client only."""

    def missing_host_key(self, client, hostname, key):
        client.get_host_keys().add(hostname, key.get_name(), key)


def _configure_host_keys(client: paramiko.SSHClient, credentials: SSHConfig) -> None:
    if credentials.verify_host_keys:
        client.load_system_host_keys()
        client.set_missing_host_key_policy(paramiko.RejectPolicy())
    else:
        client.set_missing_host_key_policy(_TransientTrustPolicy())


def _connect(
    client: paramiko.SSHClient, address: str, credentials: SSHConfig
) -> None:
    password = credentials.password.get_secret_value() or None
    try:
        client.connect(
            hostname=address,
            port=credentials.port,
            username=credentials.username,
            password=password,
            key_filename=credentials.key_filename,
            timeout=credentials.timeout,
            banner_timeout=credentials.timeout,
            auth_timeout=credentials.timeout,
            allow_agent=False,
            look_for_keys=False,
        )
    except (paramiko.SSHException, OSError) as exc:
        raise DialError(f"failed to dial: {exc}") from exc


def run_command(address: str, credentials: SSHConfig, command: str) -> str:
    """Run ``command`` on ``address`` and return its standard output.

    Blocks for at most ``credentials.timeout`` per stage. Raises a
    :class:`SessionError` subclass describing the stage that failed.
    """
    client = paramiko.SSHClient()
    try:
        _configure_host_keys(client, credentials)
        logger.debug(
            "Connecting to %s:%d as %s", address, credentials.port, credentials.username
        )
        _connect(client, address, credentials)

        transport = client.get_transport()
        if transport is None or not transport.is_active():
            raise SessionOpenError("failed to create session: transport is closed")
        try:
            channel = transport.open_session(timeout=credentials.timeout)
        except (paramiko.SSHException, OSError) as exc:
            raise SessionOpenError(f"failed to create session: {exc}") from exc

        try:
            channel.settimeout(credentials.timeout)
            channel.exec_command(command)
            with channel.makefile("rb") as stdout:
                output = stdout.read()
            status = channel.recv_exit_status()
        except (paramiko.SSHException, OSError) as exc:
            raise CommandError(f"failed to execute command: {exc}") from exc
        finally:
            channel.close()
    finally:
        client.close()

    if status != 0:
        raise CommandError(
            f"failed to execute command: Process exited with status {status}"
        )
    logger.debug("'%s' on %s returned %d bytes", command, address, len(output))
    return output.decode("utf-8", errors="replace")
