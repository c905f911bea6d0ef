"""Personal craft video gallery with local storage."""
