"""Domain protocols (structural interfaces)."""

from storyspoiler.domain.protocols.logger_protocol import LoggerProtocol

__all__ = ["LoggerProtocol"]
