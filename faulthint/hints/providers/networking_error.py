from faulthint.hints.base import BaseHintProvider
from faulthint.hints.codes import NETWORKING_CATEGORY
from faulthint.hints.rules import HintRule, any_of, code_is, message_contains_ci
from faulthint.normalization.models import NormalizedError


def _refused(_error: NormalizedError) -> str:
    return """The connection was refused: nothing is listening at that address and port.

Common causes:
- The server isn't running
- The host or port is wrong
- The server only listens on another interface (for example 127.0.0.1 vs 0.0.0.0)
- A firewall rejects the connection

How to fix:
- Start the server and check its log for the port it listens on
- Check the host and port in your configuration
- Test the port directly: nc -vz <host> <port>
- In containers, use the service name instead of localhost"""


def _address_in_use(_error: NormalizedError) -> str:
    return """The address is already in use: another process is listening on that port.

How to fix:
- Stop the other process, or pick a different port
- Find the process: lsof -i :<port> (or netstat -ano on Windows)
- Set SO_REUSEADDR on server sockets that restart quickly
- Make sure your program doesn't start the server twice"""


def _dns(_error: NormalizedError) -> str:
    return """The host name couldn't be resolved to an address.

How to fix:
- Check the host name for typos
- Check your network and DNS settings: nslookup <host>
- Don't include the scheme in host names (use example.com, not https://example.com)
- Retry later if the DNS failure was temporary"""


def _timeout(_error: NormalizedError) -> str:
    return """The network operation timed out.

How to fix:
- Check that the remote host is reachable
- Increase the timeout for slow services
- Add retries with backoff for transient failures"""


def _reset(_error: NormalizedError) -> str:
    return """The remote side closed the connection unexpectedly.

How to fix:
- Check the server logs for crashes or request limits
- Check that client and server agree on the protocol (for example TLS vs plain HTTP)
- Reconnect and retry idempotent requests"""


class NetworkingErrorHints(BaseHintProvider):
    category = NETWORKING_CATEGORY
    rules = (
        HintRule(
            any_of(code_is("ECONNREFUSED"), message_contains_ci("connection refused")),
            _refused,
        ),
        HintRule(
            any_of(code_is("EADDRINUSE"), message_contains_ci("address already in use")),
            _address_in_use,
        ),
        HintRule(
            any_of(
                code_is("ENOTFOUND", "EAI_NONAME", "EAI_AGAIN", "EAI_FAIL"),
                message_contains_ci("name or service not known", "nodename nor servname"),
            ),
            _dns,
        ),
        HintRule(
            any_of(code_is("ETIMEDOUT"), message_contains_ci("timed out")),
            _timeout,
        ),
        HintRule(
            any_of(
                code_is("ECONNRESET", "ECONNABORTED", "EPIPE"),
                message_contains_ci("connection reset", "broken pipe"),
            ),
            _reset,
        ),
    )

    def generic(self, error: NormalizedError) -> str:
        code = f" ({error.code})" if error.code else ""
        return f"""A network operation failed{code}.

How to fix:
- Check that the remote service is running and reachable
- Check host names, ports and proxy settings
- Add error handling and retries around network calls"""


PROVIDER = NetworkingErrorHints
