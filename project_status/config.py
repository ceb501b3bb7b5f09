from everett import ConfigurationMissingError, InvalidValueError
from everett.manager import ConfigManager, ConfigOSEnv, Option

from project_status.exception import InvalidInputError
from project_status.resolver import resolve_inputs

# action.yml exports every input as INPUT_<NAME>
INPUT_NAMESPACE = "input"


class ActionConfig:
    class Config:
        project_url = Option(doc='Set the URL of the GitHub project, '
                                 'https://github.com/<orgs-or-users>/<ownerName>/projects/<projectNumber>.')
        github_token = Option(doc='Set the token used to read and update the project.')
        status = Option(doc='Set the name of the Status option to move matching items to.')
        labeled = Option(default='', doc='Set a comma separated list of labels. Only items carrying one of '
                                         'them (or no labels at all) are updated. Empty means all items.')
        timeout = Option(default='30', parser=int, doc='Set the timeout in seconds of each GitHub API call.')


def get_config(environments=None):
    c = ConfigManager(environments=environments or [
        ConfigOSEnv()
    ])
    return c.with_namespace(INPUT_NAMESPACE).with_options(ActionConfig())


def settings(config=None):
    if config is None:
        config = get_config()
    values = {}
    for key in ('project_url', 'github_token', 'status', 'labeled', 'timeout'):
        try:
            values[key] = config(key)
        except ConfigurationMissingError:
            raise InvalidInputError(f"Input required and not supplied: {key.replace('_', '-')}")
        except InvalidValueError as e:
            raise InvalidInputError(f"Invalid value for input {key.replace('_', '-')}: {e}") from e
    return resolve_inputs(**values)
