"""Chat front end: app state, user commands, events and message formatting."""