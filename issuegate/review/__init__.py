# Pull request annotations rendered from Jira ticket metadata

from issuegate.review.description import merge_description, should_update_description
from issuegate.review.labels import build_label_set

__all__ = ["build_label_set", "merge_description", "should_update_description"]
