"""
Configuration handling for the UDP password generator.
"""

import os
import json
from typing import Any, Optional, Union
from udp_passgen.utils.exceptions import ConfigError


class Config:
    """Configuration manager shared by the client and the server"""
    
    DEFAULT_CONFIG = {
        "host": "127.0.0.1",
        "port": 8080,
        "default_length": 8,
        "strict": True,  # Re-validate decoded requests on the server
        "secure_random": False,
        "timeout": None,  # Client waits forever by default
        "verbosity": "info",
        "log_file": None,
    }
    
    def __init__(self, config_path: Optional[str] = None):
        """Initialize with optional path to config file"""
        self.config = self.DEFAULT_CONFIG.copy()
        self.config_path = config_path or os.path.expanduser("~/.udp_passgen_config.json")
        
        if os.path.exists(self.config_path):
            self.load()
    
    def load(self) -> None:
        """Load configuration from file"""
        try:
            with open(self.config_path, 'r') as f:
                user_config = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigError(f"Error loading config file: {e}")
        if not isinstance(user_config, dict):
            raise ConfigError(f"Config file must hold a JSON object: {self.config_path}")
        self.config.update(user_config)
    
    def save(self) -> None:
        """Save current configuration to file"""
        try:
            config_dir = os.path.dirname(self.config_path)
            if config_dir:
                os.makedirs(config_dir, exist_ok=True)
                
            with open(self.config_path, 'w') as f:
                json.dump(self.config, f, indent=2)
        except OSError as e:
            raise ConfigError(f"Error saving config file: {e}")
    
    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value"""
        return self.config.get(key, default)
    
    def set(self, key: str, value: Any) -> None:
        """Set a configuration value"""
        self.config[key] = value


def verbosity_to_level(verbosity: Union[str, int]) -> int:
    """Convert verbosity string to logging level
    
    Args:
        verbosity: Verbosity string or logging level integer
        
    Returns:
        Logging level as integer
    """
    if isinstance(verbosity, int):
        return verbosity
        
    levels = {
        "debug": 10,
        "info": 20,
        "warning": 30,
        "error": 40,
        "critical": 50
    }
    
    return levels.get(verbosity.lower(), 20)  # Default to INFO
