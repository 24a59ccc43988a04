""" Adapted from the "Python Cookbook", 3rd edition,
        by David Beazley and & Brian K. Jones

    Recipe 8.11: Simplifying the Initialization of Data Structures
    Page 270

    Extended with default values, a validation hook and read-only
    attributes once `__init__` has finished.
"""


class Structure:
    """ Structure has a list of expected arguments, in
        _fields. These can be positional or keyword arguments.
        Any name found in _defaults may be omitted.
    """
    _fields = []
    _defaults = {}

    def __init__(self, *args, **kwargs):
        if len(args) > len(self._fields):
            raise TypeError(f'Expected {len(self._fields)} arguments')

        values = dict(zip(self._fields, args))
        for name in self._fields[len(args):]:
            if name in kwargs:
                values[name] = kwargs.pop(name)
            elif name in self._defaults:
                values[name] = self._defaults[name]
            else:
                raise TypeError(f'Missing argument: {name}')

        # Anything left over is an error.
        if kwargs:
            raise TypeError('Invalid argument(s): {}'.format(','.join(kwargs)))

        for name, value in self.validate(values).items():
            object.__setattr__(self, name, value)

    def validate(self, values):
        """Override to check or convert the values before they are stored."""
        return values

    def replace(self, **changes):
        values = {name: getattr(self, name) for name in self._fields}
        values.update(changes)
        return type(self)(**values)

    def __setattr__(self, name, value):
        raise AttributeError(f'{type(self).__name__} is read-only')

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name) for name in self._fields)

    def __repr__(self):
        args = ', '.join(f'{name}={getattr(self, name)!r}' for name in self._fields)
        return f'{type(self).__name__}({args})'
