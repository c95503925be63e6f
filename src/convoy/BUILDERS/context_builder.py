# Copyright 2024 Michael Maillet, Damien Davison, Sacha Davison
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Assembly of the temporary docker build context.
"""
import logging
import os
import shutil
import tempfile
from importlib import resources
from typing import Optional
from ..errors import ResourceCopyError
from ..MODELS.build_config import BuildContext
from .consul_builder import BINARY_NAME

logger = logging.getLogger(__name__)

TEMPLATE_PACKAGE = "convoy.embeddable"
TEMPLATE_FILES = ("entrypoint.sh", "Dockerfile")
TEMP_DIR_PREFIX = "convoy-build"
# COPY keeps file modes, so the entrypoint must be executable in the context
TEMPLATE_MODES = {"entrypoint.sh": 0o755}


class ContextBuilder:
    """
    Creates a fresh build context holding the packaged templates and the consul binary.

    The directory is left in place after the build so it can be inspected.
    """
    def __init__(self, temp_root: Optional[str] = None):
        """
        :param temp_root: Directory to create contexts under. Defaults to the system temp dir.
        """
        self.temp_root = temp_root

    def assemble(self, consul_bytes: bytes) -> BuildContext:
        """
        Creates the context directory.

        :param consul_bytes: The consul binary, as returned by ConsulBuilder.build().
        :return: The populated build context.
        :raises ResourceCopyError: If any file cannot be created or copied.
        """
        try:
            path = tempfile.mkdtemp(prefix=TEMP_DIR_PREFIX, dir=self.temp_root)
        except OSError as e:
            raise ResourceCopyError(f"could not create build context directory: {e}") from e

        for name in TEMPLATE_FILES:
            self._copy_template(name, path)

        binary_dst = os.path.join(path, BINARY_NAME)
        try:
            with open(binary_dst, "wb") as f:
                f.write(consul_bytes)
            os.chmod(binary_dst, 0o777)
        except OSError as e:
            raise ResourceCopyError(f"could not write {binary_dst}: {e}") from e

        logger.debug("assembled build context in %s", path)
        return BuildContext(path=path, files=[*TEMPLATE_FILES, BINARY_NAME])

    @staticmethod
    def _copy_template(name: str, dest_dir: str):
        dst = os.path.join(dest_dir, name)
        try:
            src = resources.files(TEMPLATE_PACKAGE).joinpath(name)
            with src.open("rb") as fsrc, open(dst, "wb") as fdst:
                shutil.copyfileobj(fsrc, fdst)
            if name in TEMPLATE_MODES:
                os.chmod(dst, TEMPLATE_MODES[name])
        except OSError as e:
            raise ResourceCopyError(f"could not copy {name} into build context: {e}") from e
