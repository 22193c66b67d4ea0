# What it does: Manages the low-level object database, handling the storage and retrieval of all blobs, trees, and commits
# How it does: It implements a content-addressed storage system. `hash_object` saves content and returns its hash. `read_object` retrieves content using its hash. `resolve_prefix` expands short ids by scanning the object directory
# What data structure it uses: Hash Table / Dictionary (the entire object store is a flat content-addressed directory where the SHA-1 hash is the key)

import os
import shutil
import hashlib
import tempfile
import zlib

from . import config
from .repository import gitlet_path

TEMP_PREFIX = '.tmp-'

def objects_dir(repo_root):
    return gitlet_path(repo_root, 'objects')

def object_path(repo_root, sha1):
    return os.path.join(objects_dir(repo_root), sha1)

def hash_object(repo_root, content, obj_type, write=True): #Hashes content and optionally writes it as an object of the given type ('blob', 'tree', 'commit')
    header = f'{obj_type} {len(content)}\0'.encode()
    data = header + content

    sha1 = hashlib.sha1(data).hexdigest()

    if write and not object_exists(repo_root, sha1):
        level = config.get_compression_level(repo_root)
        _write_atomic(objects_dir(repo_root), sha1, zlib.compress(data, level))

    return sha1

def _write_atomic(directory, name, payload):
    fd, temp_path = tempfile.mkstemp(dir=directory, prefix=TEMP_PREFIX)
    try:
        with os.fdopen(fd, 'wb') as f:
            f.write(payload)
        os.replace(temp_path, os.path.join(directory, name))
    except BaseException:
        if os.path.exists(temp_path):
            os.remove(temp_path)
        raise

def read_object(repo_root, sha1): #Reads an object by its SHA-1 hash and returns its type and content
    path = object_path(repo_root, sha1)

    if not os.path.exists(path):
        raise FileNotFoundError(f"Object not found: {sha1}")

    with open(path, 'rb') as f:
        compressed_data = f.read()

    data = zlib.decompress(compressed_data)

    null_byte_index = data.find(b'\0')
    header = data[:null_byte_index].decode()
    content = data[null_byte_index + 1:]

    obj_type, _ = header.split(' ')

    return obj_type, content

def object_exists(repo_root, sha1):
    return bool(sha1) and os.path.isfile(object_path(repo_root, sha1))

def delete_object(repo_root, sha1):
    path = object_path(repo_root, sha1)
    if os.path.isfile(path):
        os.remove(path)

def list_objects(repo_root):
    return sorted(name for name in os.listdir(objects_dir(repo_root))
                  if not name.startswith(TEMP_PREFIX))

def resolve_prefix(repo_root, prefix, obj_type=None):
    """
    Expands a (possibly short) object id to the full hash.
    Returns None when nothing matches or the prefix is ambiguous.
    """
    if not prefix:
        return None
    names = list_objects(repo_root)
    if prefix in names:
        candidates = [prefix]
    else:
        candidates = [name for name in names if name.startswith(prefix)]
    if obj_type is not None:
        candidates = [name for name in candidates
                      if read_object(repo_root, name)[0] == obj_type]
    if len(candidates) != 1:
        return None
    return candidates[0]

def copy_object(src_root, dst_root, sha1): # Copies one stored object between repositories unless the destination has it
    if object_exists(dst_root, sha1):
        return False
    fd, temp_path = tempfile.mkstemp(dir=objects_dir(dst_root), prefix=TEMP_PREFIX)
    os.close(fd)
    shutil.copyfile(object_path(src_root, sha1), temp_path)
    os.replace(temp_path, object_path(dst_root, sha1))
    return True
