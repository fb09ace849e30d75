"""Enumerations of the SBOM data model and their format-specific labels."""

from __future__ import annotations

from enum import IntEnum

SPDX_EXT_REF_TYPE_PURL = "purl"
SPDX_EXT_REF_TYPE_CPE22 = "cpe22Type"
SPDX_EXT_REF_TYPE_CPE23 = "cpe23Type"
SPDX_EXT_REF_TYPE_GITOID = "gitoid"

SPDX_CATEGORY_SECURITY = "SECURITY"
SPDX_CATEGORY_PACKAGE_MANAGER = "PACKAGE-MANAGER"
SPDX_CATEGORY_PERSISTENT_ID = "PERSISTENT-ID"
SPDX_CATEGORY_OTHER = "OTHER"


class NodeType(IntEnum):
    """Kind of element a node describes."""

    PACKAGE = 0
    FILE = 1


class EdgeType(IntEnum):
    """Type of relationship between nodes."""

    UNKNOWN = 0
    AMENDS = 1
    ANCESTOR = 2
    BUILD_DEPENDENCY = 3
    BUILD_TOOL = 4
    CONTAINS = 5
    CONTAINED_BY = 6
    COPY = 7
    DATA_FILE = 8
    DEPENDENCY_MANIFEST = 9
    DEPENDS_ON = 10
    DEPENDENCY_OF = 11
    DESCENDANT = 12
    DESCRIBES = 13
    DESCRIBED_BY = 14
    DEV_DEPENDENCY = 15
    DEV_TOOL = 16
    DISTRIBUTION_ARTIFACT = 17
    DOCUMENTATION = 18
    DYNAMIC_LINK = 19
    EXAMPLE = 20
    EXPANDED_FROM_ARCHIVE = 21
    FILE_ADDED = 22
    FILE_DELETED = 23
    FILE_MODIFIED = 24
    GENERATES = 25
    GENERATED_FROM = 26
    METAFILE = 27
    OPTIONAL_COMPONENT = 28
    OPTIONAL_DEPENDENCY = 29
    OTHER = 30
    PACKAGES = 31
    PATCH = 32
    PREREQUISITE = 33
    PREREQUISITE_FOR = 34
    PROVIDED_DEPENDENCY = 35
    REQUIREMENT_FOR = 36
    RUNTIME_DEPENDENCY = 37
    SPECIFICATION_FOR = 38
    STATIC_LINK = 39
    TEST = 40
    TEST_CASE = 41
    TEST_DEPENDENCY = 42
    TEST_TOOL = 43
    VARIANT = 44

    def to_spdx2(self) -> str:
        """Return the SPDX 2 relationship label for this edge type."""
        return _EDGE_TO_SPDX2.get(self, "")


_EDGE_TO_SPDX2: dict[EdgeType, str] = {
    EdgeType.AMENDS: "AMENDS",
    EdgeType.ANCESTOR: "ANCESTOR_OF",
    EdgeType.BUILD_DEPENDENCY: "BUILD_DEPENDENCY_OF",
    EdgeType.BUILD_TOOL: "BUILD_TOOL_OF",
    EdgeType.CONTAINS: "CONTAINS",
    EdgeType.CONTAINED_BY: "CONTAINED_BY",
    EdgeType.COPY: "COPY_OF",
    EdgeType.DATA_FILE: "DATA_FILE_OF",
    EdgeType.DEPENDENCY_MANIFEST: "DEPENDENCY_MANIFEST_OF",
    EdgeType.DEPENDS_ON: "DEPENDS_ON",
    EdgeType.DEPENDENCY_OF: "DEPENDENCY_OF",
    EdgeType.DESCENDANT: "DESCENDANT_OF",
    EdgeType.DESCRIBES: "DESCRIBES",
    EdgeType.DESCRIBED_BY: "DESCRIBED_BY",
    EdgeType.DEV_DEPENDENCY: "DEV_DEPENDENCY_OF",
    EdgeType.DEV_TOOL: "DEV_TOOL_OF",
    EdgeType.DISTRIBUTION_ARTIFACT: "DISTRIBUTION_ARTIFACT",
    EdgeType.DOCUMENTATION: "DOCUMENTATION_OF",
    EdgeType.DYNAMIC_LINK: "DYNAMIC_LINK",
    EdgeType.EXAMPLE: "EXAMPLE_OF",
    EdgeType.EXPANDED_FROM_ARCHIVE: "EXPANDED_FROM_ARCHIVE",
    EdgeType.FILE_ADDED: "FILE_ADDED",
    EdgeType.FILE_DELETED: "FILE_DELETED",
    EdgeType.FILE_MODIFIED: "FILE_MODIFIED",
    EdgeType.GENERATES: "GENERATES",
    EdgeType.GENERATED_FROM: "GENERATED_FROM",
    EdgeType.METAFILE: "METAFILE_OF",
    EdgeType.OPTIONAL_COMPONENT: "OPTIONAL_COMPONENT_OF",
    EdgeType.OPTIONAL_DEPENDENCY: "OPTIONAL_DEPENDENCY_OF",
    EdgeType.OTHER: "OTHER",
    EdgeType.PACKAGES: "PACKAGE_OF",
    EdgeType.PATCH: "PATCH_APPLIED",
    EdgeType.PREREQUISITE: "HAS_PREREQUISITE",
    EdgeType.PREREQUISITE_FOR: "PREREQUISITE_FOR",
    EdgeType.PROVIDED_DEPENDENCY: "PROVIDED_DEPENDENCY_OF",
    EdgeType.REQUIREMENT_FOR: "REQUIREMENT_DESCRIPTION_FOR",
    EdgeType.RUNTIME_DEPENDENCY: "RUNTIME_DEPENDENCY_OF",
    EdgeType.SPECIFICATION_FOR: "SPECIFICATION_FOR",
    EdgeType.STATIC_LINK: "STATIC_LINK",
    EdgeType.TEST: "TEST_OF",
    EdgeType.TEST_CASE: "TEST_CASE_OF",
    EdgeType.TEST_DEPENDENCY: "TEST_DEPENDENCY_OF",
    EdgeType.TEST_TOOL: "TEST_TOOL_OF",
    EdgeType.VARIANT: "VARIANT_OF",
}

_SPDX2_TO_EDGE: dict[str, EdgeType] = {
    label: edge_type for edge_type, label in _EDGE_TO_SPDX2.items()
}
_SPDX2_TO_EDGE["PATCH_FOR"] = EdgeType.PATCH

# The stricter mapping leaves out the inverse relationship labels.
_SPDX_STRICT_TO_EDGE: dict[str, EdgeType] = {
    label: edge_type
    for label, edge_type in _SPDX2_TO_EDGE.items()
    if label
    not in {
        "CONTAINED_BY",
        "DEPENDENCY_OF",
        "DESCRIBED_BY",
        "GENERATED_FROM",
        "PATCH_APPLIED",
        "PREREQUISITE_FOR",
    }
}


def edge_type_from_spdx2(label: str) -> EdgeType:
    """Resolve an SPDX 2 relationship label (any case) to an edge type."""
    return _SPDX2_TO_EDGE.get(label.upper(), EdgeType.UNKNOWN)


def edge_type_from_spdx(name: str) -> EdgeType:
    """Resolve an exact SPDX 2 relationship name to an edge type.

    Inverse relationships such as ``DEPENDENCY_OF`` are not recognised.
    """
    return _SPDX_STRICT_TO_EDGE.get(name, EdgeType.UNKNOWN)


class HashAlgorithm(IntEnum):
    """Hash algorithms understood by the data model."""

    UNKNOWN = 0
    MD5 = 1
    SHA1 = 2
    SHA256 = 3
    SHA384 = 4
    SHA512 = 5
    SHA3_256 = 6
    SHA3_384 = 7
    SHA3_512 = 8
    BLAKE2B_256 = 9
    BLAKE2B_384 = 10
    BLAKE2B_512 = 11
    BLAKE3 = 12
    MD2 = 13
    ADLER32 = 14
    MD4 = 15
    MD6 = 16
    SHA224 = 17

    def to_spdx(self) -> str:
        """Return the SPDX 2 checksum algorithm label, or an empty string."""
        return _HASH_TO_SPDX.get(self, "")

    def to_spdx3(self) -> str:
        """Return the SPDX 3 hash algorithm vocabulary entry, or an empty string."""
        return _HASH_TO_SPDX3.get(self, "")


_HASH_TO_SPDX: dict[HashAlgorithm, str] = {
    HashAlgorithm.ADLER32: "ADLER32",
    HashAlgorithm.MD4: "MD4",
    HashAlgorithm.MD5: "MD5",
    HashAlgorithm.MD6: "MD6",
    HashAlgorithm.SHA1: "SHA1",
    HashAlgorithm.SHA224: "SHA224",
    HashAlgorithm.SHA256: "SHA256",
    HashAlgorithm.SHA384: "SHA384",
    HashAlgorithm.SHA512: "SHA512",
    HashAlgorithm.SHA3_256: "SHA3-256",
    HashAlgorithm.SHA3_384: "SHA3-384",
    HashAlgorithm.SHA3_512: "SHA3-512",
    HashAlgorithm.BLAKE2B_256: "BLAKE2b-256",
    HashAlgorithm.BLAKE2B_384: "BLAKE2b-384",
    HashAlgorithm.BLAKE2B_512: "BLAKE2b-512",
    HashAlgorithm.BLAKE3: "BLAKE3",
}

_SPDX_TO_HASH: dict[str, HashAlgorithm] = {v: k for k, v in _HASH_TO_SPDX.items()}

_HASH_TO_SPDX3: dict[HashAlgorithm, str] = {
    HashAlgorithm.MD4: "md4",
    HashAlgorithm.MD5: "md5",
    HashAlgorithm.MD6: "md6",
    HashAlgorithm.SHA1: "sha1",
    HashAlgorithm.SHA224: "sha224",
    HashAlgorithm.SHA256: "sha256",
    HashAlgorithm.SHA384: "sha384",
    HashAlgorithm.SHA512: "sha512",
    HashAlgorithm.SHA3_256: "sha3_256",
    HashAlgorithm.SHA3_384: "sha3_384",
    HashAlgorithm.SHA3_512: "sha3_512",
    HashAlgorithm.BLAKE2B_256: "blake2b256",
    HashAlgorithm.BLAKE2B_384: "blake2b384",
    HashAlgorithm.BLAKE2B_512: "blake2b512",
    HashAlgorithm.BLAKE3: "blake3",
}

_CDX_TO_HASH: dict[str, HashAlgorithm] = {
    "MD5": HashAlgorithm.MD5,
    "SHA-1": HashAlgorithm.SHA1,
    "SHA-256": HashAlgorithm.SHA256,
    "SHA-384": HashAlgorithm.SHA384,
    "SHA-512": HashAlgorithm.SHA512,
    "SHA3-256": HashAlgorithm.SHA3_256,
    "SHA3-384": HashAlgorithm.SHA3_384,
    "SHA3-512": HashAlgorithm.SHA3_512,
    "BLAKE2b-256": HashAlgorithm.BLAKE2B_256,
    "BLAKE2b-384": HashAlgorithm.BLAKE2B_384,
    "BLAKE2b-512": HashAlgorithm.BLAKE2B_512,
    "BLAKE3": HashAlgorithm.BLAKE3,
}


def hash_algorithm_from_cdx(name: str) -> HashAlgorithm:
    """Resolve a CycloneDX hash algorithm name to a hash algorithm."""
    return _CDX_TO_HASH.get(name, HashAlgorithm.UNKNOWN)


def hash_algorithm_from_spdx(name: str) -> HashAlgorithm:
    """Resolve an SPDX 2 checksum algorithm name to a hash algorithm."""
    return _SPDX_TO_HASH.get(name, HashAlgorithm.UNKNOWN)


class SoftwareIdentifierType(IntEnum):
    """Kinds of software identifiers a node can carry."""

    UNKNOWN_IDENTIFIER_TYPE = 0
    PURL = 1
    CPE22 = 2
    CPE23 = 3
    GITOID = 4

    def to_spdx2_type(self) -> str:
        """Return the SPDX 2 external reference type, or an empty string."""
        return _IDENTIFIER_TO_SPDX2.get(self, "")

    def to_spdx2_category(self) -> str:
        """Return the SPDX 2 external reference category."""
        spdx_type = self.to_spdx2_type()
        if spdx_type in {
            SPDX_EXT_REF_TYPE_CPE22,
            SPDX_EXT_REF_TYPE_CPE23,
            "advisory",
            "fix",
            "url",
            "swid",
        }:
            return SPDX_CATEGORY_SECURITY
        if spdx_type in {"maven-central", "npm", "nuget", "bower", SPDX_EXT_REF_TYPE_PURL}:
            return SPDX_CATEGORY_PACKAGE_MANAGER
        if spdx_type in {"swh", SPDX_EXT_REF_TYPE_GITOID}:
            return SPDX_CATEGORY_PERSISTENT_ID
        return SPDX_CATEGORY_OTHER


_IDENTIFIER_TO_SPDX2: dict[SoftwareIdentifierType, str] = {
    SoftwareIdentifierType.PURL: SPDX_EXT_REF_TYPE_PURL,
    SoftwareIdentifierType.CPE22: SPDX_EXT_REF_TYPE_CPE22,
    SoftwareIdentifierType.CPE23: SPDX_EXT_REF_TYPE_CPE23,
    SoftwareIdentifierType.GITOID: SPDX_EXT_REF_TYPE_GITOID,
}

_SPDX2_TO_IDENTIFIER: dict[str, SoftwareIdentifierType] = {
    v: k for k, v in _IDENTIFIER_TO_SPDX2.items()
}


def software_identifier_type_from_spdx_ext_ref_type(spdx_type: str) -> SoftwareIdentifierType:
    """Resolve an exact SPDX 2 external reference type to an identifier type."""
    return _SPDX2_TO_IDENTIFIER.get(spdx_type, SoftwareIdentifierType.UNKNOWN_IDENTIFIER_TYPE)


def software_identifier_type_from_string(query: str) -> SoftwareIdentifierType:
    """Resolve a free-form string to an identifier type."""
    found = software_identifier_type_from_spdx_ext_ref_type(query)
    if found != SoftwareIdentifierType.UNKNOWN_IDENTIFIER_TYPE:
        return found
    normalized = query.lower().strip()
    if normalized in ("cpe22", "cpe2.2"):
        return SoftwareIdentifierType.CPE22
    if normalized in ("cpe23", "cpe2.3"):
        return SoftwareIdentifierType.CPE23
    return SoftwareIdentifierType.UNKNOWN_IDENTIFIER_TYPE


class Purpose(IntEnum):
    """Primary purpose of a software element."""

    UNKNOWN_PURPOSE = 0
    APPLICATION = 1
    ARCHIVE = 2
    BOM = 3
    CONFIGURATION = 4
    CONTAINER = 5
    DATA = 6
    DEVICE = 7
    DEVICE_DRIVER = 8
    DOCUMENTATION = 9
    EVIDENCE = 10
    EXECUTABLE = 11
    FILE = 12
    FIRMWARE = 13
    FRAMEWORK = 14
    INSTALL = 15
    LIBRARY = 16
    MACHINE_LEARNING_MODEL = 17
    MANIFEST = 18
    MODEL = 19
    MODULE = 20
    OPERATING_SYSTEM = 21
    OTHER = 22
    PATCH = 23
    PLATFORM = 24
    REQUIREMENT = 25
    SOURCE = 26
    SPECIFICATION = 27
    TEST = 28


class ExternalReferenceType(IntEnum):
    """Type of an external reference attached to a node."""

    UNKNOWN = 0
    ATTESTATION = 1
    BINARY = 2
    BOM = 3
    BOWER = 4
    BUILD_META = 5
    BUILD_SYSTEM = 6
    CERTIFICATION_REPORT = 7
    CHAT = 8
    CODIFIED_INFRASTRUCTURE = 9
    COMPONENT_ANALYSIS_REPORT = 10
    CONFIGURATION = 11
    DISTRIBUTION_INTAKE = 12
    DOCUMENTATION = 13
    DOWNLOAD = 14
    DYNAMIC_ANALYSIS_REPORT = 15
    EOL_NOTICE = 16
    EVIDENCE = 17
    EXPORT_CONTROL_ASSESSMENT = 18
    FORMULATION = 19
    FUNDING = 20
    ISSUE_TRACKER = 21
    LICENSE = 22
    LOG = 23
    MAILING_LIST = 24
    MATURITY_REPORT = 25
    MAVEN_CENTRAL = 26
    METRICS = 27
    MODEL_CARD = 28
    NPM = 29
    NUGET = 30
    OTHER = 31
    POAM = 32
    PRIVACY_ASSESSMENT = 33
    PRODUCT_METADATA = 34
    PURCHASE_ORDER = 35
    QUALITY_ASSESSMENT_REPORT = 36
    QUALITY_METRICS = 37
    RELEASE_HISTORY = 38
    RELEASE_NOTES = 39
    RISK_ASSESSMENT = 40
    RUNTIME_ANALYSIS_REPORT = 41
    SECURE_SOFTWARE_ATTESTATION = 42
    SECURITY_ADVERSARY_MODEL = 43
    SECURITY_ADVISORY = 44
    SECURITY_CONTACT = 45
    SECURITY_FIX = 46
    SECURITY_OTHER = 47
    SECURITY_PENTEST_REPORT = 48
    SECURITY_POLICY = 49
    SECURITY_SWID = 50
    SECURITY_THREAT_MODEL = 51
    SOCIAL = 52
    SOURCE_ARTIFACT = 53
    STATIC_ANALYSIS_REPORT = 54
    SUPPORT = 55
    VCS = 56
    VULNERABILITY_ASSERTION = 57
    VULNERABILITY_DISCLOSURE_REPORT = 58
    VULNERABILITY_EXPLOITABILITY_ASSESSMENT = 59
    WEBSITE = 60