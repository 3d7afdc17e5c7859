"""Configuration management for Groot.

Repository options are stored in INI format in .groot/config. There is
no global config file and no environment variable overrides.
"""

import configparser
from pathlib import Path
from typing import Dict, Optional

# Options written by init, and the defaults used when an option is unset
DEFAULTS = {
    'core': {
        'repositoryformatversion': '0',
        'allowemptycommits': 'false',
    },
}


def split_key(key: str):
    """Split 'section.option' into its parts; bare options go to [core]."""
    if '.' in key:
        section, option = key.split('.', 1)
        return section, option
    return 'core', key


class Config:
    """
    Reads and writes the repository config file.
    
    Values are read lazily and cached. Writes go straight to disk.
    """
    
    def __init__(self, config_path):
        """
        Args:
            config_path: Path to the repository config file
        """
        self.config_path = Path(config_path)
        self._config: Optional[configparser.ConfigParser] = None
    
    @property
    def parser(self) -> configparser.ConfigParser:
        """Load and return the parsed config file."""
        if self._config is None:
            self._config = configparser.ConfigParser()
            if self.config_path.exists():
                self._config.read(self.config_path)
        return self._config
    
    def init(self) -> None:
        """Write the initial config file unless one already exists."""
        if self.config_path.exists():
            return
        self.set('core', 'repositoryformatversion', DEFAULTS['core']['repositoryformatversion'])
    
    def get(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        """
        Get a configuration value.
        
        Priority order (highest to lowest):
        1. Repository config
        2. fallback, if given
        3. Built-in default
        
        Args:
            section: Config section (e.g., 'core')
            key: Config key (e.g., 'allowemptycommits')
            fallback: Value to use if the option is not set
            
        Returns:
            Configuration value, or None if unset with no default
        """
        if self.parser.has_option(section, key):
            return self.parser.get(section, key)
        if fallback is not None:
            return fallback
        return DEFAULTS.get(section, {}).get(key)
    
    def get_bool(self, section: str, key: str) -> bool:
        """
        Get a boolean configuration value.
        
        Raises:
            ValueError: If the stored value is not a recognised boolean
        """
        value = self.get(section, key, fallback=None)
        if value is None:
            return False
        lowered = value.strip().lower()
        if lowered not in configparser.ConfigParser.BOOLEAN_STATES:
            raise ValueError(f"Not a boolean value for {section}.{key}: {value}")
        return configparser.ConfigParser.BOOLEAN_STATES[lowered]
    
    def set(self, section: str, key: str, value: str) -> None:
        """
        Set a configuration value and save the file.
        
        Args:
            section: Config section
            key: Config key
            value: Value to set
        """
        config = self.parser
        if not config.has_section(section):
            config.add_section(section)
        
        config.set(section, key, value)
        self._save()
    
    def unset(self, section: str, key: str) -> bool:
        """
        Remove a configuration value.
        
        Returns:
            True if value was removed, False if it didn't exist
        """
        config = self.parser
        if not config.has_option(section, key):
            return False
        
        config.remove_option(section, key)
        
        # Remove empty sections
        if not config.options(section):
            config.remove_section(section)
        
        self._save()
        return True
    
    def list_all(self) -> Dict[str, Dict[str, str]]:
        """
        List all configuration values.
        
        Returns:
            Dict of sections to key-value dicts
        """
        return {
            section: dict(self.parser.items(section))
            for section in self.parser.sections()
        }
    
    @property
    def allow_empty_commits(self) -> bool:
        return self.get_bool('core', 'allowemptycommits')
    
    def _save(self) -> None:
        with open(self.config_path, 'w') as f:
            self.parser.write(f)
