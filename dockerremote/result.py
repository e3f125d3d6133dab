class Result(object):
    """Outcome of a single request.

    Either ``value`` holds the decoded response (possibly ``None`` for an
    empty body) or ``error`` holds the failure. Iterating yields
    ``(success, value)`` so a result can be unpacked like a tuple::

        success, container = client.inspect('abc')
    """

    __slots__ = ('value', 'error')

    def __init__(self, value=None, error=None):
        if value is not None and error is not None:
            raise ValueError('A result holds either a value or an error')
        self.value = value
        self.error = error

    @classmethod
    def ok(cls, value=None):
        return cls(value=value)

    @classmethod
    def err(cls, error):
        if error is None:
            raise ValueError('An error result needs an error')
        return cls(error=error)

    @property
    def success(self):
        return self.error is None

    def unwrap(self):
        """Return the value or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value

    def __bool__(self):
        return self.success

    def __iter__(self):
        yield self.success
        yield self.value

    def __eq__(self, other):
        if not isinstance(other, Result):
            return NotImplemented
        return self.value == other.value and self.error is other.error

    def __repr__(self):
        if self.success:
            return 'Result.ok(%r)' % (self.value,)
        return 'Result.err(%r)' % (self.error,)
