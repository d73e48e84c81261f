# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

from dataclasses import dataclass, fields, replace

from typing import Any, Dict

from abc import ABCMeta


@dataclass
class UserOptions(metaclass=ABCMeta):
    """
    This is an abstract class used to create a dataclass of user options.

    The options hold the defaults for settings that are read by the functions of the package at call time.
    Applying an options instance copies each declared field onto a target object as an attribute, so the target
    always reflects the most recently applied options.

    for example:
        >>> @dataclass
        >>> class ExampleOptions(UserOptions):
        >>>     example_var : int = 1234

        >>> class Settings:
        >>>     pass
        >>> settings = Settings()
        >>> ExampleOptions().apply_options(settings)
        >>> print(settings.example_var)
        ...     1234
    """

    def override_options(self):
        '''
        This method is used for special cases when certain options should be normalized before they are applied
        '''
        pass

    def apply_options(self, target: object) -> None:
        """
        Update the options as attributes of the target object

        :param target: the instance that we are to update
        """
        target.__dict__.update(self.options_dict)

    def updated(self, **overrides: Any) -> 'UserOptions':
        """
        Return a copy of these options with the requested fields replaced.

        :param overrides: the field names and their new values
        :return: the new options instance
        :raises ValueError: if an override does not name a field of the options
        """

        known = {field.name for field in fields(self)}
        unknown = set(overrides) - known

        if unknown:
            raise ValueError(f'Unknown option(s): {", ".join(sorted(unknown))}')

        return replace(self, **overrides)

    @property
    def options_dict(self) -> Dict[str, Any]:
        """
        Determine the options input to the dataclass.

        This property method will ignore all internal properties and functions
        """

        self.override_options()
        return {field.name: getattr(self, field.name) for field in fields(self)}
