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
Builders for turning an assembled build context into a local convoy image.
"""
import logging
import os
from typing import List, Optional
from ..errors import DirectoryError, ImageBuildError
from ..MODELS.build_config import IMAGE_TAG
from ..RUNNERS.process_runner import ProcessRunner

logger = logging.getLogger(__name__)

CONTAINER_TOOL_ENV = "CONVOY_DOCKER"


class ImageBuilder:
    """
    Invokes the container build tool against a build context.
    """
    def __init__(self, tool: Optional[str] = None, runner: Optional[ProcessRunner] = None):
        """
        Initializes the ImageBuilder.

        :param tool: Container build executable. Defaults to $CONVOY_DOCKER or "docker".
        :param runner: Process runner used to invoke the tool.
        """
        self.tool = tool or os.environ.get(CONTAINER_TOOL_ENV) or "docker"
        self.runner = runner or ProcessRunner("image")

    @staticmethod
    def build_args(envoy_version: str = "") -> List[str]:
        """
        Returns the arguments passed to the container tool.

        :param envoy_version: Envoy version, e.g. "1.26". Empty keeps the Dockerfile default.
        """
        args = ["build", ".", "-t", IMAGE_TAG]
        if envoy_version:
            args[1:1] = ["--build-arg", f"ENVOY_VERSION=v{envoy_version}-latest"]
        return args

    def build(self, context_dir: str, envoy_version: str = "") -> str:
        """
        Builds the image from the given context directory.

        :return: The tag of the built image.
        :raises DirectoryError: If the context directory does not exist.
        :raises ImageBuildError: If the container tool fails.
        """
        if not os.path.isdir(context_dir):
            raise DirectoryError(f"build context {context_dir} is not a directory")

        command = [self.tool] + self.build_args(envoy_version)
        logger.info("building convoy image")
        try:
            exit_code = self.runner.run(command, working_dir=context_dir)
        except OSError as e:
            raise ImageBuildError(f"failed to build convoy image: {e}") from e
        if exit_code != 0:
            raise ImageBuildError(f"failed to build convoy image: {self.tool} build exited with {exit_code}")
        return IMAGE_TAG
