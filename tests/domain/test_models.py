"""Tests for domain models."""

import pytest

from nativehelper.domain.exceptions import UnknownArchitecture
from nativehelper.domain.models import (
    NDK_ARCHITECTURES,
    Architecture,
    Artifact,
    ArtifactType,
    PackagingKind,
    Project,
    VersionSpec,
    packaging_kind,
)


class TestArchitecture:
    """Tests for the Architecture enum."""

    def test_architecture_names(self):
        assert NDK_ARCHITECTURES == (
            "armeabi",
            "armeabi-v7a",
            "arm64-v8a",
            "mips",
            "mips64",
            "x86",
            "x86_64",
        )

    def test_from_name(self):
        assert Architecture.from_name("x86_64") is Architecture.X86_64

    def test_from_name_unknown(self):
        with pytest.raises(UnknownArchitecture, match="sparc"):
            Architecture.from_name("sparc")

    def test_str_is_abi_name(self):
        assert str(Architecture.ARMEABI_V7A) == "armeabi-v7a"


class TestPackagingKind:
    """Tests for packaging type dispatch."""

    @pytest.mark.parametrize(
        ("artifact_type", "kind"),
        [
            (ArtifactType.SO, PackagingKind.SHARED_LIBRARY),
            (ArtifactType.A, PackagingKind.STATIC_LIBRARY),
            (ArtifactType.APKLIB, PackagingKind.LIBRARY_PACKAGE),
            (ArtifactType.AAR, PackagingKind.LIBRARY_PACKAGE),
            (ArtifactType.JAR, PackagingKind.MANAGED_ARCHIVE),
            ("pom", PackagingKind.OTHER),
        ],
    )
    def test_packaging_kind(self, artifact_type, kind):
        assert packaging_kind(artifact_type) is kind

    def test_artifact_kind_property(self, make_artifact):
        assert make_artifact(type="jar").kind is PackagingKind.MANAGED_ARCHIVE


class TestArtifact:
    """Tests for the Artifact dataclass."""

    def test_artifact_immutable(self, make_artifact):
        artifact = make_artifact()
        with pytest.raises(AttributeError):
            artifact.classifier = "x86"

    def test_equal_artifacts_collapse_in_set(self, make_artifact):
        assert len({make_artifact(), make_artifact()}) == 1

    def test_classifier_and_file_are_optional(self):
        artifact = Artifact(
            group_id="g", artifact_id="a", version="1", scope=None, type="so"
        )
        assert artifact.classifier is None
        assert artifact.file is None

    def test_id_without_classifier(self, make_artifact):
        assert make_artifact().id == "acme:acme:so:1.0"

    def test_id_with_classifier(self, make_artifact):
        assert make_artifact(classifier="x86").id == "acme:acme:so:x86:1.0"

    def test_id_without_version(self):
        artifact = Artifact(
            group_id="group", artifact_id="lib", version="", scope=None, type="apklib"
        )
        assert artifact.id == "group:lib:apklib"


class TestProject:
    """Tests for the Project dataclass."""

    def test_all_artifacts_in_declaration_order(self, make_artifact):
        first = make_artifact(artifact_id="first")
        second = make_artifact(artifact_id="second")
        project = Project(dependency_artifacts=(first,), attached_artifacts=(second,))
        assert list(project.all_artifacts()) == [first, second]

    def test_all_artifacts_deduplicates(self, make_artifact):
        artifact = make_artifact()
        project = Project(
            dependency_artifacts=(artifact,), attached_artifacts=(artifact,)
        )
        assert list(project.all_artifacts()) == [artifact]

    def test_empty_project(self):
        assert list(Project().all_artifacts()) == []


class TestVersionSpec:
    """Tests for VersionSpec ordering."""

    def test_ordering(self):
        r7, r7a, r7b, r8 = (
            VersionSpec(7),
            VersionSpec(7, "a"),
            VersionSpec(7, "b"),
            VersionSpec(8),
        )
        assert r7 < r7a < r7b < r8

    def test_major_compared_numerically(self):
        assert VersionSpec(10) > VersionSpec(9, "z")

    def test_str(self):
        assert str(VersionSpec(8, "b")) == "r8b"
        assert str(VersionSpec(100)) == "r100"
