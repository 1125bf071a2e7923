"""
Handler Outcomes

Services return an Outcome on success; the status message travels inside
it instead of being pushed into the session by the service itself.
ValidationError and ForbiddenError cover the other terminal states.
"""

from dataclasses import dataclass
from typing import Optional

from flask import flash, redirect, url_for


@dataclass(frozen=True)
class Outcome:
    endpoint: str
    status: Optional[str] = None

    def respond(self):
        """Flash the one-shot status and redirect to the target list."""
        if self.status:
            flash(self.status, 'success')
        return redirect(url_for(self.endpoint))
