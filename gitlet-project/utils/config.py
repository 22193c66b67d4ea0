# What it does: Manages all read/write operations for the `.gitlet/config` file
# What data structure it uses: Map / Hash Table / Dictionary (the INI file format is a map of sections to key-value pairs, managed by Python's `configparser`)

import configparser
import os
import zlib

from .repository import gitlet_path, GitletError

DEFAULT_COMPRESSION = zlib.Z_DEFAULT_COMPRESSION

def get_config_path(repo_root):  # Returns the path to the config file within the repository
    return gitlet_path(repo_root, 'config')

def read_config(repo_root): # Reads and returns the configuration as a ConfigParser object
    config = configparser.ConfigParser()
    config_path = get_config_path(repo_root)
    if os.path.exists(config_path):
        config.read(config_path)
    return config

def write_config(repo_root, key, value): # Sets a configuration key to a value and writes it to the config file
    try:
        section, option = key.split('.', 1)
    except ValueError:
        raise GitletError("Invalid key format. Should be 'section.key'.")

    config = read_config(repo_root)
    if not config.has_section(section):
        config.add_section(section)

    config.set(section, option, value)

    with open(get_config_path(repo_root), 'w') as configfile:
        config.write(configfile)

def get_compression_level(repo_root): # zlib level for new objects, falls back to the default on bad values
    config = read_config(repo_root)
    try:
        level = config.getint('core', 'compression', fallback=DEFAULT_COMPRESSION)
    except ValueError:
        return DEFAULT_COMPRESSION
    if level < -1 or level > 9:
        return DEFAULT_COMPRESSION
    return level
