"""Tests for distribution file classification."""

import pytest

from pkgmeta.archive.formats import (
    Codec,
    Container,
    ContainerFormat,
    DistributionType,
    classify,
    enabled_extensions,
    file_extension,
)
from pkgmeta.errors import UnknownDistributionType


class TestFileExtension:
    @pytest.mark.parametrize(
        ("filename", "expected"),
        [
            ("build-0.4.0.tar.gz", "gz"),
            ("build-0.4.0-py2.py3-none-any.whl", "whl"),
            ("dist/build-0.4.0.zip", "zip"),
            ("some.dir/build", None),
            ("build", None),
            (".gz", None),
        ],
    )
    def test_extension(self, filename: str, expected: str | None) -> None:
        assert file_extension(filename) == expected


class TestClassify:
    @pytest.mark.parametrize(
        ("filename", "dist_type", "container_format"),
        [
            ("build-0.4.0.zip", DistributionType.SDIST, ContainerFormat.zip()),
            ("build-0.4.0.tar.gz", DistributionType.SDIST, ContainerFormat.tar(Codec.GZIP)),
            ("build-0.4.0.tgz", DistributionType.SDIST, ContainerFormat.tar(Codec.GZIP)),
            ("build-0.4.0.tar", DistributionType.SDIST, ContainerFormat.tar()),
            ("build-0.4.0.tar.bz2", DistributionType.SDIST, ContainerFormat.tar(Codec.BZIP2)),
            ("build-0.4.0.tbz", DistributionType.SDIST, ContainerFormat.tar(Codec.BZIP2)),
            ("build-0.4.0.tar.xz", DistributionType.SDIST, ContainerFormat.tar(Codec.XZ)),
            ("build-0.4.0.tar.lz", DistributionType.SDIST, ContainerFormat.tar(Codec.XZ)),
            ("build-0.4.0.tar.lzma", DistributionType.SDIST, ContainerFormat.tar(Codec.XZ)),
            ("build-0.4.0.tlz", DistributionType.SDIST, ContainerFormat.tar(Codec.XZ)),
            ("build-0.4.0.txz", DistributionType.SDIST, ContainerFormat.tar(Codec.XZ)),
            ("build-0.4.0-py3.9.egg", DistributionType.EGG, ContainerFormat.zip()),
            ("build-0.4.0-py2.py3-none-any.whl", DistributionType.WHEEL, ContainerFormat.zip()),
        ],
    )
    def test_supported(
        self, filename: str, dist_type: DistributionType, container_format: ContainerFormat,
    ) -> None:
        assert classify(filename) == (dist_type, container_format)

    @pytest.mark.parametrize(
        "filename",
        ["build-0.4.0.rar", "build-0.4.0.TAR.GZ", "build-0.4.0.WHL", "build", "README.md"],
    )
    def test_unknown(self, filename: str) -> None:
        with pytest.raises(UnknownDistributionType) as exc_info:
            classify(filename)
        assert exc_info.value.filename == filename

    @pytest.mark.parametrize(
        "filename",
        ["build-0.4.0.tar", "build-0.4.0.tar.bz2", "build-0.4.0.tar.xz", "build-0.4.0.tlz"],
    )
    def test_deprecated_formats_disabled(self, filename: str) -> None:
        assert classify(filename)[0] is DistributionType.SDIST
        with pytest.raises(UnknownDistributionType):
            classify(filename, deprecated_formats=False)

    @pytest.mark.parametrize(
        "filename",
        ["build-0.4.0.zip", "build-0.4.0.tar.gz", "build-0.4.0-py3.9.egg", "x-1-py3-none-any.whl"],
    )
    def test_core_formats_always_enabled(self, filename: str) -> None:
        classify(filename, deprecated_formats=False)

    def test_binary_dists_are_zip(self) -> None:
        for filename in ("a-1-py3.egg", "a-1-py3-none-any.whl"):
            _, container_format = classify(filename)
            assert container_format.container is Container.ZIP
            assert container_format.codec is Codec.NONE


class TestEnabledExtensions:
    def test_all(self) -> None:
        assert enabled_extensions() == {
            "zip", "gz", "tgz", "tar", "bz2", "tbz",
            "lz", "lzma", "tlz", "txz", "xz", "egg", "whl",
        }

    def test_without_deprecated(self) -> None:
        assert enabled_extensions(deprecated_formats=False) == {"zip", "gz", "tgz", "egg", "whl"}


class TestContainerFormat:
    def test_str(self) -> None:
        assert str(ContainerFormat.zip()) == "zip"
        assert str(ContainerFormat.tar()) == "tar"
        assert str(ContainerFormat.tar(Codec.GZIP)) == "tar+gzip"

    def test_tar_compression(self) -> None:
        assert Codec.NONE.tar_compression == ""
        assert Codec.XZ.tar_compression == "xz"

    def test_distribution_type_names(self) -> None:
        assert str(DistributionType.SDIST) == "sdist"
        assert str(DistributionType.EGG) == "bdist_egg"
        assert str(DistributionType.WHEEL) == "bdist_wheel"
