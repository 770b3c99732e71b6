"""
Tests prefixes rules-based permissions
"""
import ddt  # type: ignore[import]
from django.contrib.auth import get_user_model
from django.contrib.auth.models import AnonymousUser
from django.test.testcases import TestCase

User = get_user_model()


@ddt.ddt
class TestRulesPrefixes(TestCase):
    """
    Tests that the expected rules have been applied to prefixes.
    """

    def setUp(self):
        super().setUp()
        self.superuser = User.objects.create(
            username="superuser",
            email="superuser@example.com",
            is_superuser=True,
        )
        self.staff = User.objects.create(
            username="staff",
            email="staff@example.com",
            is_staff=True,
        )
        self.learner = User.objects.create(
            username="learner",
            email="learner@example.com",
        )
        self.inactive = User.objects.create(
            username="inactive",
            email="inactive@example.com",
            is_active=False,
        )
        self.anonymous = AnonymousUser()

    def test_add_prefix(self):
        """
        Any active, logged-in user can choose a prefix
        """
        assert self.superuser.has_perm("prefix_discussion.add_prefix")
        assert self.staff.has_perm("prefix_discussion.add_prefix")
        assert self.learner.has_perm("prefix_discussion.add_prefix")
        assert not self.inactive.has_perm("prefix_discussion.add_prefix")
        assert not self.anonymous.has_perm("prefix_discussion.add_prefix")

    def test_view_prefix(self):
        """
        Everybody sees prefixes
        """
        assert self.superuser.has_perm("prefix_discussion.view_prefix")
        assert self.staff.has_perm("prefix_discussion.view_prefix")
        assert self.learner.has_perm("prefix_discussion.view_prefix")
        assert self.anonymous.has_perm("prefix_discussion.view_prefix")

    @ddt.data(
        "prefix_discussion.manage_prefixes",
        "prefix_discussion.add_setting",
        "prefix_discussion.change_setting",
        "prefix_discussion.delete_setting",
        "prefix_discussion.view_setting",
    )
    def test_manage_prefixes(self, perm):
        """
        Only staff manage prefixes
        """
        assert self.superuser.has_perm(perm)
        assert self.staff.has_perm(perm)
        assert not self.learner.has_perm(perm)
        assert not self.anonymous.has_perm(perm)
