"""Exception types shared by producers and the pull adapter."""


class LineReadError(OSError):
    """Error indicator carried in place of a value by line reader pairs."""


class ProducerContractError(RuntimeError):
    """A producer or consumer broke the yield/next/stop handshake."""
