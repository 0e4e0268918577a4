import copy
import json
import logging
import os

import yaml

_logger = logging.getLogger(__name__)

COMMIT_TIMEOUT = 'commit-timeout'
COMMIT_HANDLER = 'commit-handler'
QUERY_HANDLER = 'query-handler'
ENDORSEMENT_POLICY = 'endorsement-policy'

DEFAULT_SETTINGS = {
    COMMIT_TIMEOUT: {'duration': 300, 'unit': 'seconds'},
    COMMIT_HANDLER: 'MSPID_SCOPE_ALLFORTX',
    QUERY_HANDLER: 'MSPID_SCOPE_SINGLE',
    ENDORSEMENT_POLICY: 'fail-fast',
}


class Config(object):
    """Gateway settings: built-in defaults overlaid with settings files and explicit values."""

    def __init__(self, settings=None):
        self._file_stores = []
        self._config = copy.deepcopy(DEFAULT_SETTINGS)
        if settings:
            self._config.update(settings)

    @staticmethod
    def from_file(path):
        config = Config()
        config.file(path)
        return config

    def file(self, path):
        if not isinstance(path, str):
            raise ValueError('The "path" parameter must be a string')

        path = os.path.abspath(path)
        _logger.debug(f'file - loading settings from ==>{path}<==')

        with open(path, 'r') as f:
            file_data = f.read()

        _, file_ext = os.path.splitext(path)
        if file_ext.lower() in ('.yml', '.yaml'):
            settings = yaml.safe_load(file_data)
        else:
            settings = json.loads(file_data)

        if settings is None:
            settings = {}
        if not isinstance(settings, dict):
            raise ValueError(f'Settings file {path} must contain a mapping')

        self._file_stores.append(path)
        self._config.update(settings)

    @property
    def files(self):
        return list(self._file_stores)

    def get(self, name, default_value=None):
        return self._config.get(name, default_value)

    def set(self, name, value):
        self._config[name] = value
