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
Builds consul from a local source checkout using its own make targets.
"""
import logging
import os
import platform
from typing import Optional
from ..errors import ArtifactReadError, DirectoryError, NativeBuildError
from ..RUNNERS.process_runner import ProcessRunner

logger = logging.getLogger(__name__)

# platform.machine() values mapped to the GOARCH names consul uses for pkg/bin/linux_<arch>
_GOARCH_ALIASES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv6l": "arm",
    "armv7l": "arm",
    "i386": "386",
    "i686": "386",
    "x86": "386",
    "ppc64le": "ppc64le",
    "s390x": "s390x",
    "riscv64": "riscv64",
}

BUILD_COMMAND = ["make", "linux"]
BINARY_NAME = "consul"


def host_arch(machine: Optional[str] = None) -> str:
    """
    Returns the GOARCH identifier of the host (or of the given machine string).
    Unknown machines are passed through lower-cased.
    """
    machine = (machine or platform.machine()).lower()
    return _GOARCH_ALIASES.get(machine, machine)


class ConsulBuilder:
    """
    Runs the native consul build for a linux target and reads back the binary.
    """
    def __init__(self, consul_location: str, arch: Optional[str] = None,
                 runner: Optional[ProcessRunner] = None):
        """
        Initializes the builder.

        :param consul_location: Path to the consul source checkout.
        :param arch: GOARCH of the binary to read. Defaults to the host architecture.
        :param runner: Process runner used to invoke make.
        """
        self.consul_location = consul_location
        self.arch = arch or host_arch()
        self.runner = runner or ProcessRunner("consul")

    @property
    def binary_path(self) -> str:
        """Location of the binary produced by `make linux`."""
        return os.path.join(self.consul_location, "pkg", "bin", f"linux_{self.arch}", BINARY_NAME)

    def build(self) -> bytes:
        """
        Builds consul and returns the contents of the produced binary.

        :raises DirectoryError: If the source location is not a directory.
        :raises NativeBuildError: If make exits with a failure status.
        :raises ArtifactReadError: If the binary is missing or unreadable.
        """
        if not os.path.isdir(self.consul_location):
            raise DirectoryError(f"consul location {self.consul_location} is not a directory")

        logger.info("building consul")
        try:
            exit_code = self.runner.run(BUILD_COMMAND, working_dir=self.consul_location)
        except OSError as e:
            raise NativeBuildError(f"failed to build consul: {e}") from e
        if exit_code != 0:
            raise NativeBuildError(f"failed to build consul: {' '.join(BUILD_COMMAND)} exited with {exit_code}")

        try:
            with open(self.binary_path, "rb") as f:
                return f.read()
        except OSError as e:
            raise ArtifactReadError(f"could not read consul binary {self.binary_path}: {e}") from e
