# Path: tests/unit/test_matcher/test_match_report.py
"""
Unit Tests for MatchReport

Tests the report bookkeeping including:
- Symmetric, tier-ranked records
- Replacement and unwinding of previous partners
- Non-match filing and cascading
- Notes buffering
- Add limit and ignored component types
"""

from deep_match.matcher import MatchRecord, MatchReport, MatchTier
from deep_match.scene import Light, Rigidbody, SceneNode, Transform


def make_node(name, *children):
    node = SceneNode(name)
    node.add_component(Transform())
    for child in children:
        node.add_child(child)
    return node


class TestAddMatch:
    """Test recording correspondences."""

    def test_records_are_symmetric(self):
        """Recording a->b also records b->a."""
        report = MatchReport()
        a, b = SceneNode('A'), SceneNode('B')

        report.add_match(a, b, MatchTier.VALUE_EQUAL)

        assert report.get_match(a) is b
        assert report.get_match(b) is a
        assert report.get_match_tier(b) == MatchTier.VALUE_EQUAL
        assert report.matched(a) and report.matched(b)

    def test_both_sides_are_good(self):
        """Both subjects of a match join good_matches."""
        report = MatchReport()
        a, b = SceneNode('A'), SceneNode('B')
        report.add_match(a, b, MatchTier.NAMES_EQUAL)

        assert set(map(id, report.good_matches)) == {id(a), id(b)}
        assert report.length == 2

    def test_none_operand_is_ignored(self):
        """add_match with None does nothing."""
        report = MatchReport()
        report.add_match(None, SceneNode('B'), MatchTier.EQUAL)
        assert report.length == 0
        assert report.add_count == 0

    def test_no_downgrade(self):
        """A weaker tier never replaces a stronger one."""
        report = MatchReport()
        a, b = SceneNode('A'), SceneNode('B')

        report.add_match(a, b, MatchTier.VALUE_EQUAL)
        report.add_match(a, b, MatchTier.NAMES_EQUAL)

        assert report.get_match_tier(a) == MatchTier.VALUE_EQUAL

    def test_equal_tier_is_rejected(self):
        """An equal tier does not move an existing pairing."""
        report = MatchReport()
        a, b, c = SceneNode('A'), SceneNode('B'), SceneNode('C')

        report.add_match(a, b, MatchTier.VALUE_EQUAL)
        report.add_match(a, c, MatchTier.VALUE_EQUAL)

        assert report.get_match(a) is b
        assert report.get_match(c) is None

    def test_upgrade_replaces_tier(self):
        """A stronger tier for the same pair upgrades both sides."""
        report = MatchReport()
        a, b = SceneNode('A'), SceneNode('B')

        report.add_match(a, b, MatchTier.NAMES_EQUAL)
        report.add_match(a, b, MatchTier.EQUAL)

        assert report.get_match_tier(a) == MatchTier.EQUAL
        assert report.get_match_tier(b) == MatchTier.EQUAL
        assert report.is_equal

    def test_identity_match(self):
        """A subject may be matched with itself."""
        report = MatchReport()
        a = SceneNode('A')
        report.add_match(a, a, MatchTier.EQUAL)
        assert report.get_match(a) is a
        assert report.length == 1


class TestReplacement:
    """Test moving a subject to a better partner."""

    def test_old_partner_is_unwound(self):
        """Re-pairing a with c files a's previous partner b as a non-match."""
        report = MatchReport()
        a, b, c = SceneNode('A'), SceneNode('B'), SceneNode('C')

        report.add_match(a, b, MatchTier.NAMES_EQUAL)
        report.add_match(a, c, MatchTier.VALUE_EQUAL)

        assert report.get_match(a) is c
        assert report.get_match(c) is a
        assert report.get_match_tier(b) == MatchTier.NONE
        assert b in report.bad_matches

    def test_unwinding_cascades_to_partner_subtree(self):
        """The unwound partner's children and components become non-matches."""
        report = MatchReport()
        child_b = make_node('Child')
        a, b, c = make_node('A'), make_node('B', child_b), make_node('C')
        report.add_match(child_b, SceneNode('Other'), MatchTier.VALUE_EQUAL)

        report.add_match(a, b, MatchTier.NAMES_EQUAL)
        report.add_match(a, c, MatchTier.VALUE_EQUAL)

        assert child_b in report.bad_matches
        assert b.components[0] in report.bad_matches

    def test_displaced_partner_of_b_is_not_left_dangling(self):
        """When b moves to a, b's previous counterpart loses its record."""
        report = MatchReport()
        a, b, d = SceneNode('A'), SceneNode('B'), SceneNode('D')

        report.add_match(d, b, MatchTier.NAMES_EQUAL)
        report.add_match(a, b, MatchTier.VALUE_EQUAL)

        assert report.get_match(b) is a
        assert report.get_match(d) is None
        assert d in report.bad_matches

    def test_bad_subject_heals_when_matched(self):
        """A non-match later paired leaves the bad set."""
        report = MatchReport()
        a, b = SceneNode('A'), SceneNode('B')

        report.add_non_match(a)
        assert not report.is_equal

        report.add_match(a, b, MatchTier.VALUE_EQUAL)
        assert a not in report.bad_matches
        assert report.is_equal

    def test_replace_match_without_record_files_non_match(self):
        """replace_match with no new record files the subject as bad."""
        report = MatchReport()
        a, b = SceneNode('A'), SceneNode('B')
        report.add_match(a, b, MatchTier.VALUE_EQUAL)

        report.replace_match(a)

        assert a in report.bad_matches
        assert b in report.bad_matches
        assert report.get_match_details(a) == MatchRecord()


class TestNonMatches:
    """Test filing unmatched subjects."""

    def test_none_marks_report_unequal(self):
        """add_non_match(None) is a global, sticky failure."""
        report = MatchReport()
        report.add_non_match(None)
        assert not report.is_equal
        assert report.length == 0

    def test_node_cascades_to_subtree(self):
        """Filing a node files its children and components."""
        report = MatchReport()
        leaf = make_node('Leaf')
        root = make_node('Root', leaf)

        report.add_non_match(root)

        bad = report.bad_matches
        assert root in bad
        assert leaf in bad
        assert root.components[0] in bad
        assert leaf.components[0] in bad

    def test_recorded_subject_is_not_refiled(self):
        """A subject with a record is left alone."""
        report = MatchReport()
        a, b = SceneNode('A'), SceneNode('B')
        report.add_match(a, b, MatchTier.VALUE_EQUAL)

        report.add_non_match(a)

        assert report.get_match(a) is b
        assert report.is_equal

    def test_ignored_components_are_not_cascaded(self):
        """Ignored component types are skipped when cascading."""
        report = MatchReport(ignore_components=[Light])
        node = make_node('Lamp')
        light = node.add_component(Light())

        report.add_non_match(node)

        assert light not in report.bad_matches
        assert report.should_ignore(light)
        assert not report.should_ignore(node)


class TestAddLimit:
    """Test the add_limit capacity."""

    def test_limit_drops_later_matches(self):
        """With add_limit=2 a third add_match is ignored."""
        report = MatchReport(add_limit=2)
        pairs = [(SceneNode(f'A{i}'), SceneNode(f'B{i}')) for i in range(3)]

        for a, b in pairs:
            report.add_match(a, b, MatchTier.VALUE_EQUAL)

        assert report.add_count == 2
        assert report.get_match(pairs[2][0]) is None
        assert report.length == 4

    def test_rejected_calls_still_count(self):
        """Calls rejected by the better-match rule count toward the limit."""
        report = MatchReport(add_limit=2)
        a, b, c = SceneNode('A'), SceneNode('B'), SceneNode('C')

        report.add_match(a, b, MatchTier.VALUE_EQUAL)
        report.add_match(a, b, MatchTier.NAMES_EQUAL)
        report.add_match(c, SceneNode('D'), MatchTier.VALUE_EQUAL)

        assert report.get_match(c) is None

    def test_zero_is_unlimited(self):
        """add_limit=0 records everything."""
        report = MatchReport()
        for i in range(50):
            report.add_match(SceneNode(f'A{i}'), SceneNode(f'B{i}'), MatchTier.VALUE_EQUAL)
        assert report.add_count == 50


class TestIgnoredComponents:
    """Test ignored component types."""

    def test_ignored_subject_is_never_recorded(self):
        """add_match on an ignored type records nothing."""
        report = MatchReport(ignore_components=(Rigidbody,))
        report.add_match(Rigidbody(), Rigidbody(), MatchTier.VALUE_EQUAL)
        assert report.length == 0

    def test_subclasses_are_ignored(self):
        """Ignoring uses isinstance."""
        class HeavyBody(Rigidbody):
            pass

        report = MatchReport(ignore_components=(Rigidbody,))
        assert report.should_ignore(HeavyBody())


class TestNotes:
    """Test mismatch notes."""

    def test_push_notes_attaches_and_clears_buffer(self):
        """Pending notes move onto the key."""
        report = MatchReport()
        a, b = Transform(), Transform()
        report.add_match(a, b, MatchTier.NAMES_EQUAL)

        report.add_note('local_scale: (1.0, 1.0, 1.0) != (2.0, 2.0, 2.0)')
        report.push_notes(a)

        assert report.get_notes(a) == ['local_scale: (1.0, 1.0, 1.0) != (2.0, 2.0, 2.0)']
        assert report.pending_notes == []

    def test_push_notes_merges(self):
        """Repeated pushes extend existing notes."""
        report = MatchReport()
        a, b = Transform(), Transform()
        report.add_match(a, b, MatchTier.NAMES_EQUAL)

        report.add_note('one')
        report.push_notes(a)
        report.add_note('two')
        report.push_notes(a)

        assert report.get_notes(a) == ['one', 'two']

    def test_push_none_discards(self):
        """push_notes(None) drops the buffer."""
        report = MatchReport()
        report.add_note('stale')
        report.push_notes(None)
        assert report.pending_notes == []

    def test_structural_upgrade_clears_notes(self):
        """Notes disappear once the subject is matched by value."""
        report = MatchReport()
        a, b = Transform(), Transform()
        report.add_match(a, b, MatchTier.NAMES_EQUAL)
        report.add_note('mass: 1.0 != 2.0')
        report.push_notes(a)

        report.add_match(a, b, MatchTier.VALUE_EQUAL)

        assert report.get_notes(a) == []

    def test_unknown_subject_has_no_notes(self):
        """Querying a never-compared subject returns an empty list."""
        report = MatchReport()
        assert report.get_notes(Transform()) == []
        assert report.matched(Transform()) is False


class TestQueries:
    """Test read access."""

    def test_unrecorded_details_are_empty(self):
        """Unknown subjects report an empty record."""
        report = MatchReport()
        assert report.get_match_details(SceneNode('X')) == MatchRecord()
        assert report.get_match_tier(SceneNode('X')) == MatchTier.NONE

    def test_all_matches_lists_records(self):
        """all_matches returns (subject, record) pairs."""
        report = MatchReport()
        a, b = SceneNode('A'), SceneNode('B')
        report.add_match(a, b, MatchTier.VALUE_EQUAL)

        subjects = [subject for subject, _ in report.all_matches]
        assert len(subjects) == 2
        assert all(isinstance(record, MatchRecord) for _, record in report.all_matches)

    def test_new_report_is_equal(self):
        """An empty report is equal."""
        assert MatchReport().is_equal
        assert len(MatchReport()) == 0
