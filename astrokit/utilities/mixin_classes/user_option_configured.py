"""
This module provides the :class:`UserOptionConfigured` mixin class that enables classes to be configured using
:class:`.UserOptions`-derived classes while maintaining the ability to reset to the original configuration state.

Example:
    Basic usage of the UserOptionConfigured mixin::

        from astrokit.utilities.options import UserOptions
        from astrokit.utilities.mixin_classes import UserOptionConfigured
        from dataclasses import dataclass

        @dataclass
        class MyOptions(UserOptions):
            tolerance: float = 1e-9

        class MyCheck(UserOptionConfigured[MyOptions], MyOptions):
            def __init__(self, options: MyOptions | None = None):
                super().__init__(MyOptions, options=options)

        my_check = MyCheck()
        my_check.tolerance = 1e-3
        my_check.reset_settings()  # tolerance is 1e-9 again

.. Note::
    The :class:`UserOptionConfigured` class should come first in the inheritance order due to Method Resolution Order
    (MRO) requirements.
"""

from copy import deepcopy

from typing import Generic, TypeVar

from astrokit.utilities.options import UserOptions


OptionsT = TypeVar("OptionsT", bound=UserOptions)
"""
Type variable bound to UserOptions for type safety
"""


class UserOptionConfigured(Generic[OptionsT]):
    """
    Mixin class providing UserOptions-based configuration with reset capability.

    If options are not provided during initialization, the default initialization of the options type is used.  A deep
    copy of the options used at initialization is stored in :attr:`original_options` so that later changes to the
    options object do not affect :meth:`reset_settings`.
    """

    def __init__(self, options_type: type[OptionsT], *args, options: OptionsT | None = None, **kwargs) -> None:
        """
        :param options_type: The type of the :class:`.UserOptions` to use
        :param options: An optional instance of `options_type` preconfigured.
        """

        super().__init__(*args, **kwargs)

        if options is None:
            options = options_type()

        options.apply_options(self)

        self._original_options: OptionsT = deepcopy(options)
        """
        The original configuration for this class
        """

    def reset_settings(self) -> None:
        """
        Resets the class to the state it was originally initialized with.
        """

        self.original_options.apply_options(self)

    @property
    def original_options(self) -> OptionsT:
        """
        The original configuration options used during initialization.
        """
        return self._original_options
