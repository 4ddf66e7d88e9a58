"""
Validators shared by the test suite, modelling posts with comments and authors.
"""

from moderare import Collection, Item, Validator


class AuthorValidator(Validator):
    """Authors need a name."""

    def validate(self, author):
        if not author.get("name"):
            return "Author name is required."
        return True


class CommentValidator(Validator):
    """Comments need a body and may include their author."""

    available_includes = ["author"]

    def validate(self, comment):
        if not comment.get("body"):
            return ["Comment body is required."]
        return True

    def include_author(self, comment, params):
        if "author" not in comment:
            return None
        return Item(comment["author"], AuthorValidator())


class PostValidator(Validator):
    """Posts need a title and may include comments and an author."""

    available_includes = ["comments", "author"]

    def __init__(self):
        self.seen_params = {}

    def validate(self, post):
        return bool(post.get("title"))

    def include_comments(self, post, params):
        self.seen_params["comments"] = params
        comments = post.get("comments", [])
        limit = params.get("limit")
        if limit:
            comments = comments[: int(limit[0])]
        return Collection(comments, CommentValidator())

    def include_author(self, post, params):
        return Item(post.get("author", {}), AuthorValidator())
