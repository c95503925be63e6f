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
Error types raised by the convoy build pipeline.

Every error is fatal: it is raised by the stage that failed and reported once
by the command line interface.
"""


class ConvoyError(Exception):
    """
    Base class for all convoy build failures.
    """


class ConfigurationError(ConvoyError):
    """A required configuration value is missing."""


class DirectoryError(ConvoyError):
    """A directory the pipeline needs to work in is missing or unusable."""


class NativeBuildError(ConvoyError):
    """The native consul build exited with a failure status."""


class ArtifactReadError(ConvoyError):
    """The consul binary produced by the native build could not be read."""


class ResourceCopyError(ConvoyError):
    """Packaged templates or the consul binary could not be written to the build context."""


class ImageBuildError(ConvoyError):
    """The container build tool exited with a failure status."""
