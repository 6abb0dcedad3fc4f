from pathlib import Path
from typing import List, Union

import utils
from errors import ConfigurationError
from models.resource_spec import ResourceGroup, resource_groups_from_dict


def load_resource_groups(path: Union[str, Path]) -> List[ResourceGroup]:
    """Load the repository -> resource -> {type, pattern} table from a JSON file."""
    try:
        data = utils.read_json_file(path)
    except FileNotFoundError:
        raise ConfigurationError(f"Resource table {path} not found") from None
    except ValueError as e:
        raise ConfigurationError(str(e)) from e
    return resource_groups_from_dict(data)
