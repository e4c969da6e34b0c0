"""
Unit tests for PathMapper and CandidateSet.
"""

import pytest

from testfinder.mapping import CandidateSet, PathMapper


@pytest.fixture
def mapper():
    return PathMapper()


@pytest.mark.unit
class TestCandidateSet:
    """Test insertion-ordered de-duplication."""

    def test_keeps_insertion_order(self):
        candidates = CandidateSet(["b", "a", "c"])

        assert candidates.to_list() == ["b", "a", "c"]

    def test_readding_is_a_noop(self):
        candidates = CandidateSet(["a", "b"])
        candidates.add("a")
        candidates.extend(["b", "c"])

        assert candidates.to_list() == ["a", "b", "c"]
        assert len(candidates) == 3

    def test_membership(self):
        candidates = CandidateSet(["a"])

        assert "a" in candidates
        assert "b" not in candidates

    def test_empty(self):
        assert CandidateSet().to_list() == []


@pytest.mark.unit
class TestLibraryPaths:
    """Test lib/ and eagerlib/ mapping."""

    def test_lib_file(self, mapper):
        assert mapper.map_to_test_candidates("lib/foo.rb") == [
            "test/unit/foo_test.rb",
            "test/unit/lib/foo_test.rb",
        ]

    def test_component_lib_file(self, mapper):
        assert mapper.map_to_test_candidates("components/billing/lib/foo.rb") == [
            "components/billing/test/unit/foo_test.rb",
            "components/billing/test/unit/lib/foo_test.rb",
        ]

    def test_eagerlib_file(self, mapper):
        assert mapper.map_to_test_candidates("eagerlib/foo.rb") == [
            "test/unit/foo_test.rb",
            "test/unit/lib/foo_test.rb",
        ]

    def test_nested_lib_file(self, mapper):
        assert mapper.map_to_test_candidates("lib/tasks/cleanup.rb") == [
            "test/unit/tasks/cleanup_test.rb",
            "test/unit/lib/tasks/cleanup_test.rb",
        ]

    def test_component_prefix_spans_nested_directories(self, mapper):
        result = mapper.map_to_test_candidates("components/platform/billing/lib/foo.rb")

        assert result == [
            "components/platform/billing/test/unit/foo_test.rb",
            "components/platform/billing/test/unit/lib/foo_test.rb",
        ]


@pytest.mark.unit
class TestDirectTestFiles:
    """Test files map to themselves."""

    def test_test_file_is_its_own_candidate(self, mapper):
        assert mapper.map_to_test_candidates("test/models/person_test.rb") == [
            "test/models/person_test.rb"
        ]

    def test_component_test_file(self, mapper):
        path = "components/billing/test/unit/invoice_test.rb"

        assert mapper.map_to_test_candidates(path) == [path]

    def test_non_test_file_under_test_dir(self, mapper):
        assert mapper.map_to_test_candidates("test/test_helper.rb") == []


@pytest.mark.unit
class TestControllerPaths:
    """Test app/controllers mapping."""

    def test_controller_maps_to_functional_test_first(self, mapper):
        result = mapper.map_to_test_candidates("app/controllers/widgets_controller.rb")

        assert result[0] == "test/controllers/widgets_controller_test.rb"

    def test_controller_also_matches_app_subtree_rule(self, mapper):
        result = mapper.map_to_test_candidates("app/controllers/widgets_controller.rb")

        assert result == [
            "test/controllers/widgets_controller_test.rb",
            "test/unit/controllers/widgets_controller_test.rb",
            "test/unit/widgets_controller/widgets_controller_test.rb",
        ]

    def test_namespaced_controller(self, mapper):
        result = mapper.map_to_test_candidates("app/controllers/api/widgets_controller.rb")

        assert result[0] == "test/controllers/api/widgets_controller_test.rb"
        assert "test/unit/api/widgets_controller_test.rb" in result

    def test_component_controller(self, mapper):
        result = mapper.map_to_test_candidates(
            "components/shop/app/controllers/carts_controller.rb"
        )

        assert result[0] == "components/shop/test/controllers/carts_controller_test.rb"


@pytest.mark.unit
class TestModelPaths:
    """Test app/models mapping, including pluralized controller tests."""

    def test_model_candidates(self, mapper):
        result = mapper.map_to_test_candidates("app/models/person.rb")

        assert result == [
            "test/controllers/person_controller_test.rb",
            "test/models/person_test.rb",
            "test/unit/person_test.rb",
            "test/controllers/people_controller_test.rb",
            "test/controllers/admin/people_controller_test.rb",
            "test/controllers/api/people_controller_test.rb",
            "test/unit/models/person_test.rb",
            "test/unit/person/person_test.rb",
        ]

    def test_singular_controller_test_comes_before_plural(self, mapper):
        result = mapper.map_to_test_candidates("app/models/widget.rb")

        singular = result.index("test/controllers/widget_controller_test.rb")
        plural = result.index("test/controllers/widgets_controller_test.rb")
        assert singular < plural

    def test_regular_plural(self, mapper):
        result = mapper.map_to_test_candidates("app/models/category.rb")

        assert "test/controllers/categories_controller_test.rb" in result
        assert "test/controllers/api/categories_controller_test.rb" in result

    def test_component_model(self, mapper):
        result = mapper.map_to_test_candidates("components/billing/app/models/invoice.rb")

        assert result[:6] == [
            "components/billing/test/controllers/invoice_controller_test.rb",
            "components/billing/test/models/invoice_test.rb",
            "components/billing/test/unit/invoice_test.rb",
            "components/billing/test/controllers/invoices_controller_test.rb",
            "components/billing/test/controllers/admin/invoices_controller_test.rb",
            "components/billing/test/controllers/api/invoices_controller_test.rb",
        ]

    def test_namespaced_model_deduplicates_overlapping_rules(self, mapper):
        result = mapper.map_to_test_candidates("app/models/admin/user.rb")

        assert result == [
            "test/controllers/admin/user_controller_test.rb",
            "test/models/admin/user_test.rb",
            "test/unit/admin/user_test.rb",
            "test/controllers/admin/users_controller_test.rb",
            "test/controllers/admin/admin/users_controller_test.rb",
            "test/controllers/api/admin/users_controller_test.rb",
            "test/unit/models/admin/user_test.rb",
        ]
        assert len(result) == len(set(result))


@pytest.mark.unit
class TestAppSubtreePaths:
    """Test the generic app/<subtree>/ rule."""

    def test_service_object(self, mapper):
        assert mapper.map_to_test_candidates("app/services/billing/charge.rb") == [
            "test/unit/services/billing/charge_test.rb",
            "test/unit/billing/charge_test.rb",
        ]

    def test_first_and_last_segments_only(self, mapper):
        result = mapper.map_to_test_candidates("app/jobs/reports/daily/export.rb")

        assert result == [
            "test/unit/jobs/reports/daily/export_test.rb",
            "test/unit/reports/export_test.rb",
        ]

    def test_single_segment_remainder(self, mapper):
        assert mapper.map_to_test_candidates("app/helpers/dates.rb") == [
            "test/unit/helpers/dates_test.rb",
            "test/unit/dates/dates_test.rb",
        ]


@pytest.mark.unit
class TestMaintenanceAndWebPaths:
    """Test maintenance scripts and web components."""

    def test_maintenance_script(self, mapper):
        assert mapper.map_to_test_candidates("db/maintenance/maintenance/cleanup.rb") == [
            "test/unit/maintenance/cleanup_test.rb"
        ]

    def test_web_component_test_nests_under_path(self, mapper):
        path = "app/javascript/components/nav/NavBar.tsx"

        assert mapper.map_to_test_candidates(path) == [
            "app/javascript/components/nav/NavBar.tsx/tests/NavBar.test.tsx"
        ]

    def test_top_level_components_dir(self, mapper):
        assert mapper.map_to_test_candidates("components/web/Button.tsx") == [
            "components/web/Button.tsx/tests/Button.test.tsx"
        ]


@pytest.mark.unit
class TestUnmatchedPaths:
    """Test that unmatched paths produce nothing."""

    @pytest.mark.parametrize(
        "path",
        [
            "",
            "README.md",
            "Gemfile",
            "app/models/person.py",
            "config/routes.rb",
            "/lib/foo.rb",
            "lib/fooxrb",
            "src/components/Button.jsx",
        ],
    )
    def test_no_candidates(self, mapper, path):
        assert mapper.map_to_test_candidates(path) == []


@pytest.mark.unit
class TestMapperProperties:
    """Determinism, de-duplication and configuration."""

    @pytest.mark.parametrize(
        "path",
        [
            "app/models/person.rb",
            "app/models/admin/user.rb",
            "components/billing/lib/foo.rb",
            "app/controllers/widgets_controller.rb",
        ],
    )
    def test_repeated_calls_are_identical(self, mapper, path):
        assert mapper.map_to_test_candidates(path) == mapper.map_to_test_candidates(path)

    @pytest.mark.parametrize(
        "path",
        [
            "app/models/person.rb",
            "app/models/admin/user.rb",
            "app/helpers/dates.rb",
            "components/a/app/models/b.rb",
        ],
    )
    def test_no_duplicates(self, mapper, path):
        result = mapper.map_to_test_candidates(path)

        assert len(result) == len(set(result))

    def test_custom_extensions(self):
        mapper = PathMapper.for_extensions("py", "vue")

        assert mapper.map_to_test_candidates("lib/foo.py") == [
            "test/unit/foo_test.py",
            "test/unit/lib/foo_test.py",
        ]
        assert mapper.map_to_test_candidates("lib/foo.rb") == []
        assert mapper.map_to_test_candidates("components/ui/Card.vue") == [
            "components/ui/Card.vue/tests/Card.test.vue"
        ]

    def test_injected_pluralizer(self):
        class Shouting:
            def plural(self, word):
                return word.upper()

        mapper = PathMapper.for_extensions(pluralizer=Shouting())
        result = mapper.map_to_test_candidates("app/models/ox.rb")

        assert "test/controllers/OX_controller_test.rb" in result
        assert "test/controllers/ox_controller_test.rb" in result

    def test_empty_rule_table(self):
        assert PathMapper(rules=[]).map_to_test_candidates("lib/foo.rb") == []
