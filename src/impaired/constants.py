# Impaired
# Copyright (C) 2025  Impaired developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

# --- Constants ---
# Logging
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Item handles (hex digits of the SHA-256 content hash)
HANDLE_LENGTH = 16

# Keys for the terminal loop
DEFAULT_LEFT_KEY = "a"
DEFAULT_RIGHT_KEY = "b"
DEFAULT_QUIT_KEY = "q"

# Win counting
WIN_POINTS = 1
LOSS_POINTS = 0

# Item card types (JSON items may pick one with a "type" field)
CARD_SIMPLE = "simple-card"
CARD_TICKET = "ticket-card"
CARD_TYPES = (CARD_SIMPLE, CARD_TICKET)

# Exit codes
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130
