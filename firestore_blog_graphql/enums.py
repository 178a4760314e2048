from enum import Enum


class FirestoreOperators(str, Enum):
    EQ = "=="

    def __str__(self):
        return self.value


class Collections(str, Enum):
    USERS = "users"
    POSTS = "posts"
    COMMENTS = "comments"

    def __str__(self):
        return self.value
