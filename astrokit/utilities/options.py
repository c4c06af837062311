"""
This module provides the :class:`UserOptions` abstract dataclass used to configure classes in astrokit.
"""

from dataclasses import dataclass, fields

from typing import Dict, Any

from abc import ABCMeta


@dataclass
class UserOptions(metaclass=ABCMeta):
    """
    This is an abstract class used to create a dataclass of user options.

    These options are used to set defaults for the attributes of the class they configure.

    Example:
        :class:`.ConsistencyCheckOptions` contains the default options for the :class:`.RotationConsistencyCheck`
        class.

    Custom objects built from this abstract class should follow the naming scheme <callable_name>Options and be passed
    as the ``options`` keyword argument to callable_name.__init__().

    To apply options to your class, the :meth:`apply_options` method should be invoked.

    for example:
        >>> @dataclass
        >>> class ExampleOptions(UserOptions):
        >>>     example_var : int = 1234

        >>> class Example:
        >>>     def __init__(self, options = None):
        >>>         if options is None:
        >>>             options = ExampleOptions()
        >>>         options.apply_options(self) #apply the options as attributes of self
        >>> my_example = Example()
        >>> print(my_example.example_var)
        ...     1234
    """

    def override_options(self):
        '''
        This method is used for special cases when certain options should be overwritten before they are applied
        '''
        pass

    def apply_options(self, target: object) -> None:
        """
        Update the options as attributes of the target

        :param target: the instance that we are to update
        """
        target.__dict__.update(self.options_dict)

    @property
    def options_dict(self) -> Dict[str, Any]:
        """
        The options stored in this dataclass as a dictionary mapping the option name to its value.
        """

        self.override_options()
        return {field.name: getattr(self, field.name) for field in fields(self)}
