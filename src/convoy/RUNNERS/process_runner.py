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
Synchronous execution of external build tools.
"""
import logging
import subprocess
from typing import List, Optional

logger = logging.getLogger(__name__)


class ProcessRunner:
    """
    Runs a single external command to completion.
    """
    def __init__(self, name: str):
        """
        Initializes the process runner.

        Args:
            name (str): Identifier used in log messages.
        """
        self.name = name

    def run(self, command: List[str], working_dir: Optional[str] = None) -> int:
        """
        Runs the command and waits for it to finish.

        Output is inherited from the current process and not captured.

        Args:
            command (List[str]): Command and arguments to execute.
            working_dir (Optional[str]): Directory to run the command in.

        Returns:
            int: The exit code of the command.

        Raises:
            OSError: If the command could not be started.
        """
        logger.debug("[%s] running %s in %s", self.name, " ".join(command), working_dir or ".")
        # Avoid shell=True for security reasons (CWE-78)
        completed = subprocess.run(command, cwd=working_dir, shell=False)
        if completed.returncode != 0:
            logger.debug("[%s] exited with %d", self.name, completed.returncode)
        return completed.returncode
