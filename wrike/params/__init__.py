"""Parameter dataclasses for the API methods and their form encoding."""