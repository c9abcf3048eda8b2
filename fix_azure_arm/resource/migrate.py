from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from attr import define, field

from fix_azure_arm.enums import ClosedEnum, OpenEnum
from fix_azure_arm.resource.base import ArmModel, ListResult, OperationDisplay

service_name = "migrate"


class RecommendedDiskType(OpenEnum):
    UNKNOWN = "Unknown"
    STANDARD = "Standard"
    PREMIUM = "Premium"
    STANDARD_SSD = "StandardSSD"
    STANDARD_OR_PREMIUM = "StandardOrPremium"


class RecommendedDiskSize(OpenEnum):
    UNKNOWN = "Unknown"
    STANDARD_S4 = "Standard_S4"
    STANDARD_S6 = "Standard_S6"
    STANDARD_S10 = "Standard_S10"
    STANDARD_S15 = "Standard_S15"
    STANDARD_S20 = "Standard_S20"
    STANDARD_S30 = "Standard_S30"
    STANDARD_S40 = "Standard_S40"
    STANDARD_S50 = "Standard_S50"
    PREMIUM_P4 = "Premium_P4"
    PREMIUM_P6 = "Premium_P6"
    PREMIUM_P10 = "Premium_P10"
    PREMIUM_P15 = "Premium_P15"
    PREMIUM_P20 = "Premium_P20"
    PREMIUM_P30 = "Premium_P30"
    PREMIUM_P40 = "Premium_P40"
    PREMIUM_P50 = "Premium_P50"
    STANDARD_S60 = "Standard_S60"
    STANDARD_S70 = "Standard_S70"
    STANDARD_S80 = "Standard_S80"
    PREMIUM_P60 = "Premium_P60"
    PREMIUM_P70 = "Premium_P70"
    PREMIUM_P80 = "Premium_P80"
    STANDARD_SSD_E10 = "StandardSSD_E10"
    STANDARD_SSD_E15 = "StandardSSD_E15"
    STANDARD_SSD_E20 = "StandardSSD_E20"
    STANDARD_SSD_E30 = "StandardSSD_E30"
    STANDARD_SSD_E40 = "StandardSSD_E40"
    STANDARD_SSD_E50 = "StandardSSD_E50"
    STANDARD_SSD_E60 = "StandardSSD_E60"
    STANDARD_SSD_E70 = "StandardSSD_E70"
    STANDARD_SSD_E80 = "StandardSSD_E80"
    STANDARD_SSD_E4 = "StandardSSD_E4"
    STANDARD_SSD_E6 = "StandardSSD_E6"


class CloudSuitability(OpenEnum):
    UNKNOWN = "Unknown"
    NOT_SUITABLE = "NotSuitable"
    SUITABLE = "Suitable"
    CONDITIONALLY_SUITABLE = "ConditionallySuitable"
    READINESS_UNKNOWN = "ReadinessUnknown"


class AssessedDiskSuitabilityExplanation(OpenEnum):
    UNKNOWN = "Unknown"
    NOT_APPLICABLE = "NotApplicable"
    DISK_SIZE_GREATER_THAN_SUPPORTED = "DiskSizeGreaterThanSupported"
    NO_SUITABLE_DISK_SIZE_FOR_IOPS = "NoSuitableDiskSizeForIops"
    NO_SUITABLE_DISK_SIZE_FOR_THROUGHPUT = "NoSuitableDiskSizeForThroughput"
    NO_DISK_SIZE_FOUND_IN_SELECTED_LOCATION = "NoDiskSizeFoundInSelectedLocation"
    NO_DISK_SIZE_FOUND_FOR_SELECTED_REDUNDANCY = "NoDiskSizeFoundForSelectedRedundancy"
    INTERNAL_ERROR_OCCURRED_FOR_DISK_EVALUATION = "InternalErrorOccurredForDiskEvaluation"
    NO_EA_PRICE_FOUND_FOR_DISK_SIZE = "NoEaPriceFoundForDiskSize"


class AssessedDiskSuitabilityDetail(OpenEnum):
    NONE = "None"
    NUMBER_OF_READ_OPERATIONS_PER_SECOND_MISSING = "NumberOfReadOperationsPerSecondMissing"
    NUMBER_OF_WRITE_OPERATIONS_PER_SECOND_MISSING = "NumberOfWriteOperationsPerSecondMissing"
    MEGABYTES_PER_SECOND_OF_READ_MISSING = "MegabytesPerSecondOfReadMissing"
    MEGABYTES_PER_SECOND_OF_WRITE_MISSING = "MegabytesPerSecondOfWriteMissing"
    DISK_GIGABYTES_CONSUMED_MISSING = "DiskGigabytesConsumedMissing"
    DISK_GIGABYTES_PROVISIONED_MISSING = "DiskGigabytesProvisionedMissing"
    NUMBER_OF_READ_OPERATIONS_PER_SECOND_OUT_OF_RANGE = "NumberOfReadOperationsPerSecondOutOfRange"
    NUMBER_OF_WRITE_OPERATIONS_PER_SECOND_OUT_OF_RANGE = "NumberOfWriteOperationsPerSecondOutOfRange"
    MEGABYTES_PER_SECOND_OF_READ_OUT_OF_RANGE = "MegabytesPerSecondOfReadOutOfRange"
    MEGABYTES_PER_SECOND_OF_WRITE_OUT_OF_RANGE = "MegabytesPerSecondOfWriteOutOfRange"
    DISK_GIGABYTES_CONSUMED_OUT_OF_RANGE = "DiskGigabytesConsumedOutOfRange"
    DISK_GIGABYTES_PROVISIONED_OUT_OF_RANGE = "DiskGigabytesProvisionedOutOfRange"


class BootType(OpenEnum):
    UNKNOWN = "Unknown"
    EFI = "EFI"
    BIOS = "BIOS"


class RecommendedSize(OpenEnum):
    UNKNOWN = "Unknown"
    BASIC_A0 = "Basic_A0"
    BASIC_A1 = "Basic_A1"
    BASIC_A2 = "Basic_A2"
    BASIC_A3 = "Basic_A3"
    BASIC_A4 = "Basic_A4"
    STANDARD_A0 = "Standard_A0"
    STANDARD_A1 = "Standard_A1"
    STANDARD_A2 = "Standard_A2"
    STANDARD_A3 = "Standard_A3"
    STANDARD_A4 = "Standard_A4"
    STANDARD_A5 = "Standard_A5"
    STANDARD_A6 = "Standard_A6"
    STANDARD_A7 = "Standard_A7"
    STANDARD_A8 = "Standard_A8"
    STANDARD_A9 = "Standard_A9"
    STANDARD_A10 = "Standard_A10"
    STANDARD_A11 = "Standard_A11"
    STANDARD_A1_V2 = "Standard_A1_v2"
    STANDARD_A2_V2 = "Standard_A2_v2"
    STANDARD_A4_V2 = "Standard_A4_v2"
    STANDARD_A8_V2 = "Standard_A8_v2"
    STANDARD_A2M_V2 = "Standard_A2m_v2"
    STANDARD_A4M_V2 = "Standard_A4m_v2"
    STANDARD_A8M_V2 = "Standard_A8m_v2"
    STANDARD_D1 = "Standard_D1"
    STANDARD_D2 = "Standard_D2"
    STANDARD_D3 = "Standard_D3"
    STANDARD_D4 = "Standard_D4"
    STANDARD_D11 = "Standard_D11"
    STANDARD_D12 = "Standard_D12"
    STANDARD_D13 = "Standard_D13"
    STANDARD_D14 = "Standard_D14"
    STANDARD_D1_V2 = "Standard_D1_v2"
    STANDARD_D2_V2 = "Standard_D2_v2"
    STANDARD_D3_V2 = "Standard_D3_v2"
    STANDARD_D4_V2 = "Standard_D4_v2"
    STANDARD_D5_V2 = "Standard_D5_v2"
    STANDARD_D11_V2 = "Standard_D11_v2"
    STANDARD_D12_V2 = "Standard_D12_v2"
    STANDARD_D13_V2 = "Standard_D13_v2"
    STANDARD_D14_V2 = "Standard_D14_v2"
    STANDARD_D15_V2 = "Standard_D15_v2"
    STANDARD_DS1 = "Standard_DS1"
    STANDARD_DS2 = "Standard_DS2"
    STANDARD_DS3 = "Standard_DS3"
    STANDARD_DS4 = "Standard_DS4"
    STANDARD_DS11 = "Standard_DS11"
    STANDARD_DS12 = "Standard_DS12"
    STANDARD_DS13 = "Standard_DS13"
    STANDARD_DS14 = "Standard_DS14"
    STANDARD_DS1_V2 = "Standard_DS1_v2"
    STANDARD_DS2_V2 = "Standard_DS2_v2"
    STANDARD_DS3_V2 = "Standard_DS3_v2"
    STANDARD_DS4_V2 = "Standard_DS4_v2"
    STANDARD_DS5_V2 = "Standard_DS5_v2"
    STANDARD_DS11_V2 = "Standard_DS11_v2"
    STANDARD_DS12_V2 = "Standard_DS12_v2"
    STANDARD_DS13_V2 = "Standard_DS13_v2"
    STANDARD_DS14_V2 = "Standard_DS14_v2"
    STANDARD_DS15_V2 = "Standard_DS15_v2"
    STANDARD_F1 = "Standard_F1"
    STANDARD_F2 = "Standard_F2"
    STANDARD_F4 = "Standard_F4"
    STANDARD_F8 = "Standard_F8"
    STANDARD_F16 = "Standard_F16"
    STANDARD_F1S = "Standard_F1s"
    STANDARD_F2S = "Standard_F2s"
    STANDARD_F4S = "Standard_F4s"
    STANDARD_F8S = "Standard_F8s"
    STANDARD_F16S = "Standard_F16s"
    STANDARD_G1 = "Standard_G1"
    STANDARD_G2 = "Standard_G2"
    STANDARD_G3 = "Standard_G3"
    STANDARD_G4 = "Standard_G4"
    STANDARD_G5 = "Standard_G5"
    STANDARD_GS1 = "Standard_GS1"
    STANDARD_GS2 = "Standard_GS2"
    STANDARD_GS3 = "Standard_GS3"
    STANDARD_GS4 = "Standard_GS4"
    STANDARD_GS5 = "Standard_GS5"
    STANDARD_H8 = "Standard_H8"
    STANDARD_H16 = "Standard_H16"
    STANDARD_H8M = "Standard_H8m"
    STANDARD_H16M = "Standard_H16m"
    STANDARD_H16R = "Standard_H16r"
    STANDARD_H16MR = "Standard_H16mr"
    STANDARD_L4S = "Standard_L4s"
    STANDARD_L8S = "Standard_L8s"
    STANDARD_L16S = "Standard_L16s"
    STANDARD_L32S = "Standard_L32s"
    STANDARD_D2S_V3 = "Standard_D2s_v3"
    STANDARD_D4S_V3 = "Standard_D4s_v3"
    STANDARD_D8S_V3 = "Standard_D8s_v3"
    STANDARD_D16S_V3 = "Standard_D16s_v3"
    STANDARD_D32S_V3 = "Standard_D32s_v3"
    STANDARD_D64S_V3 = "Standard_D64s_v3"
    STANDARD_D2_V3 = "Standard_D2_v3"
    STANDARD_D4_V3 = "Standard_D4_v3"
    STANDARD_D8_V3 = "Standard_D8_v3"
    STANDARD_D16_V3 = "Standard_D16_v3"
    STANDARD_D32_V3 = "Standard_D32_v3"
    STANDARD_D64_V3 = "Standard_D64_v3"
    STANDARD_F2S_V2 = "Standard_F2s_v2"
    STANDARD_F4S_V2 = "Standard_F4s_v2"
    STANDARD_F8S_V2 = "Standard_F8s_v2"
    STANDARD_F16S_V2 = "Standard_F16s_v2"
    STANDARD_F32S_V2 = "Standard_F32s_v2"
    STANDARD_F64S_V2 = "Standard_F64s_v2"
    STANDARD_F72S_V2 = "Standard_F72s_v2"
    STANDARD_E2_V3 = "Standard_E2_v3"
    STANDARD_E4_V3 = "Standard_E4_v3"
    STANDARD_E8_V3 = "Standard_E8_v3"
    STANDARD_E16_V3 = "Standard_E16_v3"
    STANDARD_E32_V3 = "Standard_E32_v3"
    STANDARD_E64_V3 = "Standard_E64_v3"
    STANDARD_E2S_V3 = "Standard_E2s_v3"
    STANDARD_E4S_V3 = "Standard_E4s_v3"
    STANDARD_E8S_V3 = "Standard_E8s_v3"
    STANDARD_E16S_V3 = "Standard_E16s_v3"
    STANDARD_E32S_V3 = "Standard_E32s_v3"
    STANDARD_E64S_V3 = "Standard_E64s_v3"
    STANDARD_M64S = "Standard_M64s"
    STANDARD_M64MS = "Standard_M64ms"
    STANDARD_M128S = "Standard_M128s"
    STANDARD_M128MS = "Standard_M128ms"


class AssessedMachineSuitabilityExplanation(OpenEnum):
    UNKNOWN = "Unknown"
    NOT_APPLICABLE = "NotApplicable"
    GUEST_OPERATING_SYSTEM_ARCHITECTURE_NOT_SUPPORTED = "GuestOperatingSystemArchitectureNotSupported"
    GUEST_OPERATING_SYSTEM_NOT_SUPPORTED = "GuestOperatingSystemNotSupported"
    BOOT_TYPE_NOT_SUPPORTED = "BootTypeNotSupported"
    MORE_DISKS_THAN_SUPPORTED = "MoreDisksThanSupported"
    NO_SUITABLE_VM_SIZE_FOUND = "NoSuitableVmSizeFound"
    ONE_OR_MORE_DISKS_NOT_SUITABLE = "OneOrMoreDisksNotSuitable"
    ONE_OR_MORE_ADAPTERS_NOT_SUITABLE = "OneOrMoreAdaptersNotSuitable"
    INTERNAL_ERROR_OCCURRED_DURING_COMPUTE_EVALUATION = "InternalErrorOccurredDuringComputeEvaluation"
    INTERNAL_ERROR_OCCURRED_DURING_STORAGE_EVALUATION = "InternalErrorOccurredDuringStorageEvaluation"
    INTERNAL_ERROR_OCCURRED_DURING_NETWORK_EVALUATION = "InternalErrorOccurredDuringNetworkEvaluation"
    NO_VM_SIZE_SUPPORTS_STORAGE_PERFORMANCE = "NoVmSizeSupportsStoragePerformance"
    NO_VM_SIZE_SUPPORTS_NETWORK_PERFORMANCE = "NoVmSizeSupportsNetworkPerformance"
    NO_VM_SIZE_FOR_SELECTED_PRICING_TIER = "NoVmSizeForSelectedPricingTier"
    NO_VM_SIZE_FOR_SELECTED_AZURE_LOCATION = "NoVmSizeForSelectedAzureLocation"
    CHECK_RED_HAT_LINUX_VERSION = "CheckRedHatLinuxVersion"
    CHECK_OPEN_SUSE_LINUX_VERSION = "CheckOpenSuseLinuxVersion"
    CHECK_WINDOWS_SERVER_2008_R2_VERSION = "CheckWindowsServer2008R2Version"
    CHECK_CENT_OS_VERSION = "CheckCentOsVersion"
    CHECK_DEBIAN_LINUX_VERSION = "CheckDebianLinuxVersion"
    CHECK_SUSE_LINUX_VERSION = "CheckSuseLinuxVersion"
    CHECK_ORACLE_LINUX_VERSION = "CheckOracleLinuxVersion"
    CHECK_UBUNTU_LINUX_VERSION = "CheckUbuntuLinuxVersion"
    CHECK_CORE_OS_LINUX_VERSION = "CheckCoreOsLinuxVersion"
    WINDOWS_SERVER_VERSION_CONDITIONALLY_SUPPORTED = "WindowsServerVersionConditionallySupported"
    NO_GUEST_OPERATING_SYSTEM_CONDITIONALLY_SUPPORTED = "NoGuestOperatingSystemConditionallySupported"
    WINDOWS_CLIENT_VERSIONS_CONDITIONALLY_SUPPORTED = "WindowsClientVersionsConditionallySupported"
    BOOT_TYPE_UNKNOWN = "BootTypeUnknown"
    GUEST_OPERATING_SYSTEM_UNKNOWN = "GuestOperatingSystemUnknown"
    WINDOWS_SERVER_VERSIONS_SUPPORTED_WITH_CAVEAT = "WindowsServerVersionsSupportedWithCaveat"
    WINDOWS_OS_NO_LONGER_UNDER_MS_SUPPORT = "WindowsOSNoLongerUnderMSSupport"
    ENDORSED_WITH_CONDITIONS_LINUX_DISTRIBUTIONS = "EndorsedWithConditionsLinuxDistributions"
    UNENDORSED_LINUX_DISTRIBUTIONS = "UnendorsedLinuxDistributions"
    NO_VM_SIZE_FOR_STANDARD_PRICING_TIER = "NoVmSizeForStandardPricingTier"
    NO_VM_SIZE_FOR_BASIC_PRICING_TIER = "NoVmSizeForBasicPricingTier"


class AssessedMachineSuitabilityDetail(OpenEnum):
    NONE = "None"
    RECOMMENDED_SIZE_HAS_LESS_NETWORK_ADAPTERS = "RecommendedSizeHasLessNetworkAdapters"
    CANNOT_REPORT_COMPUTE_COST = "CannotReportComputeCost"
    CANNOT_REPORT_STORAGE_COST = "CannotReportStorageCost"
    CANNOT_REPORT_BANDWIDTH_COSTS = "CannotReportBandwidthCosts"
    PERCENTAGE_OF_CORES_UTILIZED_MISSING = "PercentageOfCoresUtilizedMissing"
    PERCENTAGE_OF_MEMORY_UTILIZED_MISSING = "PercentageOfMemoryUtilizedMissing"
    PERCENTAGE_OF_CORES_UTILIZED_OUT_OF_RANGE = "PercentageOfCoresUtilizedOutOfRange"
    PERCENTAGE_OF_MEMORY_UTILIZED_OUT_OF_RANGE = "PercentageOfMemoryUtilizedOutOfRange"


class AssessedNetworkAdapterSuitabilityExplanation(OpenEnum):
    UNKNOWN = "Unknown"
    NOT_APPLICABLE = "NotApplicable"
    INTERNAL_ERROR_OCCURRED = "InternalErrorOccurred"


class AssessedNetworkAdapterSuitabilityDetail(OpenEnum):
    NONE = "None"
    MEGABYTES_OF_DATA_TRANSMITTED_MISSING = "MegabytesOfDataTransmittedMissing"
    MEGABYTES_OF_DATA_TRANSMITTED_OUT_OF_RANGE = "MegabytesOfDataTransmittedOutOfRange"


class AzureLocation(OpenEnum):
    UNKNOWN = "Unknown"
    EAST_ASIA = "EastAsia"
    SOUTHEAST_ASIA = "SoutheastAsia"
    AUSTRALIA_EAST = "AustraliaEast"
    AUSTRALIA_SOUTHEAST = "AustraliaSoutheast"
    BRAZIL_SOUTH = "BrazilSouth"
    CANADA_CENTRAL = "CanadaCentral"
    CANADA_EAST = "CanadaEast"
    WEST_EUROPE = "WestEurope"
    NORTH_EUROPE = "NorthEurope"
    CENTRAL_INDIA = "CentralIndia"
    SOUTH_INDIA = "SouthIndia"
    WEST_INDIA = "WestIndia"
    JAPAN_EAST = "JapanEast"
    JAPAN_WEST = "JapanWest"
    KOREA_CENTRAL = "KoreaCentral"
    KOREA_SOUTH = "KoreaSouth"
    UK_WEST = "UkWest"
    UK_SOUTH = "UkSouth"
    NORTH_CENTRAL_US = "NorthCentralUs"
    EAST_US = "EastUs"
    WEST_US2 = "WestUs2"
    SOUTH_CENTRAL_US = "SouthCentralUs"
    CENTRAL_US = "CentralUs"
    EAST_US2 = "EastUs2"
    WEST_US = "WestUs"
    WEST_CENTRAL_US = "WestCentralUs"
    GERMANY_CENTRAL = "GermanyCentral"
    GERMANY_NORTHEAST = "GermanyNortheast"
    CHINA_NORTH = "ChinaNorth"
    CHINA_EAST = "ChinaEast"
    US_GOV_ARIZONA = "USGovArizona"
    US_GOV_TEXAS = "USGovTexas"
    US_GOV_IOWA = "USGovIowa"
    US_GOV_VIRGINIA = "USGovVirginia"
    US_DOD_CENTRAL = "USDoDCentral"
    US_DOD_EAST = "USDoDEast"


class AzureOfferCode(OpenEnum):
    UNKNOWN = "Unknown"
    MSAZR0003P = "MSAZR0003P"
    MSAZR0044P = "MSAZR0044P"
    MSAZR0059P = "MSAZR0059P"
    MSAZR0060P = "MSAZR0060P"
    MSAZR0062P = "MSAZR0062P"
    MSAZR0063P = "MSAZR0063P"
    MSAZR0064P = "MSAZR0064P"
    MSAZR0029P = "MSAZR0029P"
    MSAZR0022P = "MSAZR0022P"
    MSAZR0023P = "MSAZR0023P"
    MSAZR0148P = "MSAZR0148P"
    MSAZR0025P = "MSAZR0025P"
    MSAZR0036P = "MSAZR0036P"
    MSAZR0120P = "MSAZR0120P"
    MSAZR0121P = "MSAZR0121P"
    MSAZR0122P = "MSAZR0122P"
    MSAZR0123P = "MSAZR0123P"
    MSAZR0124P = "MSAZR0124P"
    MSAZR0125P = "MSAZR0125P"
    MSAZR0126P = "MSAZR0126P"
    MSAZR0127P = "MSAZR0127P"
    MSAZR0128P = "MSAZR0128P"
    MSAZR0129P = "MSAZR0129P"
    MSAZR0130P = "MSAZR0130P"
    MSAZR0111P = "MSAZR0111P"
    MSAZR0144P = "MSAZR0144P"
    MSAZR0149P = "MSAZR0149P"
    MSMCAZR0044P = "MSMCAZR0044P"
    MSMCAZR0059P = "MSMCAZR0059P"
    MSMCAZR0060P = "MSMCAZR0060P"
    MSMCAZR0063P = "MSMCAZR0063P"
    MSMCAZR0120P = "MSMCAZR0120P"
    MSMCAZR0121P = "MSMCAZR0121P"
    MSMCAZR0125P = "MSMCAZR0125P"
    MSMCAZR0128P = "MSMCAZR0128P"
    MSAZRDE0003P = "MSAZRDE0003P"
    MSAZRDE0044P = "MSAZRDE0044P"
    MSAZRUSGOV0003P = "MSAZRUSGOV0003P"
    EA = "EA"


class AzurePricingTier(OpenEnum):
    STANDARD = "Standard"
    BASIC = "Basic"


class AzureStorageRedundancy(OpenEnum):
    UNKNOWN = "Unknown"
    LOCALLY_REDUNDANT = "LocallyRedundant"
    ZONE_REDUNDANT = "ZoneRedundant"
    GEO_REDUNDANT = "GeoRedundant"
    READ_ACCESS_GEO_REDUNDANT = "ReadAccessGeoRedundant"


class Percentile(OpenEnum):
    PERCENTILE50 = "Percentile50"
    PERCENTILE90 = "Percentile90"
    PERCENTILE95 = "Percentile95"
    PERCENTILE99 = "Percentile99"


class TimeRange(OpenEnum):
    DAY = "Day"
    WEEK = "Week"
    MONTH = "Month"
    CUSTOM = "Custom"


class AssessmentStage(OpenEnum):
    IN_PROGRESS = "InProgress"
    UNDER_REVIEW = "UnderReview"
    APPROVED = "Approved"


class Currency(OpenEnum):
    UNKNOWN = "Unknown"
    USD = "USD"
    DKK = "DKK"
    CAD = "CAD"
    IDR = "IDR"
    JPY = "JPY"
    KRW = "KRW"
    NZD = "NZD"
    NOK = "NOK"
    RUB = "RUB"
    SAR = "SAR"
    ZAR = "ZAR"
    SEK = "SEK"
    TRY = "TRY"
    GBP = "GBP"
    MXN = "MXN"
    MYR = "MYR"
    INR = "INR"
    HKD = "HKD"
    BRL = "BRL"
    TWD = "TWD"
    EUR = "EUR"
    CHF = "CHF"
    ARS = "ARS"
    AUD = "AUD"
    CNY = "CNY"


class AzureHybridUseBenefit(OpenEnum):
    UNKNOWN = "Unknown"
    YES = "Yes"
    NO = "No"


class SizingCriterion(OpenEnum):
    PERFORMANCE_BASED = "PerformanceBased"
    AS_ON_PREMISES = "AsOnPremises"


class ReservedInstance(OpenEnum):
    NONE = "None"
    RI1_YEAR = "RI1Year"
    RI3_YEAR = "RI3Year"


class AzureDiskType(OpenEnum):
    UNKNOWN = "Unknown"
    STANDARD = "Standard"
    PREMIUM = "Premium"
    STANDARD_SSD = "StandardSSD"
    STANDARD_OR_PREMIUM = "StandardOrPremium"


class AssessmentStatus(OpenEnum):
    CREATED = "Created"
    UPDATED = "Updated"
    RUNNING = "Running"
    COMPLETED = "Completed"
    INVALID = "Invalid"
    OUT_OF_SYNC = "OutOfSync"
    OUT_DATED = "OutDated"


class OperationType(OpenEnum):
    ADD = "Add"
    REMOVE = "Remove"


class GroupStatus(OpenEnum):
    CREATED = "Created"
    UPDATED = "Updated"
    RUNNING = "Running"
    COMPLETED = "Completed"
    INVALID = "Invalid"


class PrivateEndpointConnectionProvisioningState(ClosedEnum):
    ACCEPTED = "Accepted"
    IN_PROGRESS = "InProgress"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"


class PrivateLinkServiceConnectionStatus(ClosedEnum):
    APPROVED = "Approved"
    PENDING = "Pending"
    REJECTED = "Rejected"
    DISCONNECTED = "Disconnected"


class ProjectStatus(OpenEnum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class ProvisioningState(OpenEnum):
    ACCEPTED = "Accepted"
    CREATING = "Creating"
    DELETING = "Deleting"
    FAILED = "Failed"
    MOVING = "Moving"
    SUCCEEDED = "Succeeded"


@define(kw_only=True)
class MigrateResource(ArmModel):
    """
    Resources of the assessment service carry an etag and no system data.
    """

    id: Optional[str] = field(default=None, metadata={"description": "Path reference to this resource."})
    name: Optional[str] = field(default=None, metadata={"description": "Unique name of the resource."})
    type: Optional[str] = field(default=None, metadata={"description": "Type of the object."})
    e_tag: Optional[str] = field(default=None, metadata={"description": "For optimistic concurrency control."})

    @property
    def resource_group_name(self) -> Optional[str]:
        if self.id is None:
            return None
        parts = self.id.split("/")
        for idx, segment in enumerate(parts[:-1]):
            if segment.lower() == "resourcegroups":
                return parts[idx + 1]
        return None


@define(kw_only=True)
class ResourceId:
    id: Optional[str] = field(default=None, metadata={"description": "The ARM id of the resource."})


@define(kw_only=True)
class PrivateLinkServiceConnectionState:
    status: Optional[PrivateLinkServiceConnectionStatus] = field(default=None, metadata={"description": "Connection status of the private endpoint connection."})  # fmt: skip
    description: Optional[str] = field(default=None, metadata={"description": "Description of the private endpoint connection."})  # fmt: skip
    actions_required: Optional[str] = field(default=None, metadata={"description": "Actions required on the private endpoint connection."})  # fmt: skip


@define(kw_only=True)
class PrivateEndpointConnectionProperties:
    provisioning_state: Optional[PrivateEndpointConnectionProvisioningState] = field(default=None, metadata={"description": "Indicates whether there is an ongoing operation on the private endpoint."})  # fmt: skip
    private_endpoint: Optional[ResourceId] = field(default=None, metadata={"description": "ARM id for the private endpoint resource corresponding to the connection."})  # fmt: skip
    private_link_service_connection_state: Optional[PrivateLinkServiceConnectionState] = field(default=None, metadata={"description": "State of the private endpoint connection."})  # fmt: skip


@define(kw_only=True)
class PrivateEndpointConnection(MigrateResource):
    properties: PrivateEndpointConnectionProperties = field(factory=PrivateEndpointConnectionProperties, metadata={"description": "Properties of the private endpoint endpoint connection."})  # fmt: skip


@define(kw_only=True)
class PrivateEndpointConnectionCollection(ListResult):
    value: List[PrivateEndpointConnection] = field(factory=list, metadata={"description": "A list of private endpoint connections for a project."})  # fmt: skip


@define(kw_only=True)
class PrivateLinkResourceProperties:
    required_members: Optional[List[str]] = field(default=None, metadata={"description": "The private link resource required member names."})  # fmt: skip
    required_zone_names: Optional[List[str]] = field(default=None, metadata={"description": "Required DNS zone names of the the private link resource."})  # fmt: skip
    group_id: Optional[str] = field(default=None, metadata={"description": "The private link resource group id."})  # fmt: skip


@define(kw_only=True)
class PrivateLinkResource(ArmModel):
    id: Optional[str] = field(default=None, metadata={"description": "Path reference to this private link resource."})  # fmt: skip
    name: Optional[str] = field(default=None, metadata={"description": "Name of the private link resource."})
    type: Optional[str] = field(default=None, metadata={"description": "Type of the object."})
    properties: Optional[PrivateLinkResourceProperties] = field(default=None, metadata={"description": "Properties of the private link resource."})  # fmt: skip


@define(kw_only=True)
class PrivateLinkResourceCollection(ListResult):
    value: List[PrivateLinkResource] = field(factory=list, metadata={"description": "Array of results."})


@define(kw_only=True)
class ProjectProperties:
    created_timestamp: Optional[datetime] = field(default=None, metadata={"description": "Time when this project was created. Date-Time represented in ISO-8601 format."})  # fmt: skip
    updated_timestamp: Optional[datetime] = field(default=None, metadata={"description": "Time when this project was last updated. Date-Time represented in ISO-8601 format."})  # fmt: skip
    service_endpoint: Optional[str] = field(default=None, metadata={"description": "Endpoint at which the collector agent can call agent REST API."})  # fmt: skip
    assessment_solution_id: Optional[str] = field(default=None, metadata={"description": "Assessment solution ARM id tracked by Microsoft.Migrate/migrateProjects."})  # fmt: skip
    project_status: Optional[ProjectStatus] = field(default=None, metadata={"description": "Assessment project status."})  # fmt: skip
    customer_workspace_id: Optional[str] = field(default=None, metadata={"description": "The ARM id of service map workspace created by customer."})  # fmt: skip
    customer_workspace_location: Optional[str] = field(default=None, metadata={"description": "Location of service map workspace created by customer."})  # fmt: skip
    number_of_groups: Optional[int] = field(default=None, metadata={"description": "Number of groups created in the project."})  # fmt: skip
    number_of_machines: Optional[int] = field(default=None, metadata={"description": "Number of machines in the project."})  # fmt: skip
    number_of_assessments: Optional[int] = field(default=None, metadata={"description": "Number of assessments created in the project."})  # fmt: skip
    last_assessment_timestamp: Optional[datetime] = field(default=None, metadata={"description": "Time when last assessment was created. Date-Time represented in ISO-8601 format."})  # fmt: skip
    public_network_access: Optional[str] = field(default=None, metadata={"description": "This value can be set to 'enabled' to avoid breaking changes on existing customer resources and templates. If set to 'disabled', traffic over public interface is not allowed, and private endpoint connections would be the exclusive access method."})  # fmt: skip
    private_endpoint_connections: Optional[List[PrivateEndpointConnection]] = field(default=None, metadata={"description": "The list of private endpoint connections to the project."})  # fmt: skip
    customer_storage_account_arm_id: Optional[str] = field(default=None, metadata={"description": "The ARM id of the storage account used for interactions when public access is disabled."})  # fmt: skip
    provisioning_state: Optional[ProvisioningState] = field(default=None, metadata={"description": "Provisioning state of the project."})  # fmt: skip


@define(kw_only=True)
class Project(MigrateResource):
    location: Optional[str] = field(default=None, metadata={"description": "Azure location in which project is created."})  # fmt: skip
    tags: Optional[Dict[str, str]] = field(default=None, metadata={"description": "Tags provided by Azure Tagging service."})  # fmt: skip
    properties: Optional[ProjectProperties] = field(default=None, metadata={"description": "Properties of the project."})  # fmt: skip


@define(kw_only=True)
class ProjectResultList(ListResult):
    value: List[Project] = field(factory=list, metadata={"description": "List of projects."})


@define(kw_only=True)
class GroupProperties:
    group_status: Optional[GroupStatus] = field(default=None, metadata={"description": "Whether the group has been created and is valid."})  # fmt: skip
    machine_count: Optional[int] = field(default=None, metadata={"description": "Number of machines part of this group."})  # fmt: skip
    assessments: Optional[List[str]] = field(default=None, metadata={"description": "List of References to Assessments created on this group."})  # fmt: skip
    are_assessments_running: Optional[bool] = field(default=None, metadata={"description": "If the assessments are in running state."})  # fmt: skip
    created_timestamp: Optional[datetime] = field(default=None, metadata={"description": "Time when this group was created. Date-Time represented in ISO-8601 format."})  # fmt: skip
    updated_timestamp: Optional[datetime] = field(default=None, metadata={"description": "Time when this group was last updated. Date-Time represented in ISO-8601 format."})  # fmt: skip
    group_type: Optional[str] = field(default=None, metadata={"description": "The type of group."})


@define(kw_only=True)
class Group(MigrateResource):
    properties: GroupProperties = field(factory=GroupProperties, metadata={"description": "Properties of the group."})  # fmt: skip


@define(kw_only=True)
class GroupResultList(ListResult):
    value: List[Group] = field(factory=list, metadata={"description": "List of groups."})


@define(kw_only=True)
class GroupBodyProperties:
    operation_type: Optional[OperationType] = field(default=None, metadata={"description": "Whether to add or remove the machines."})  # fmt: skip
    machines: Optional[List[str]] = field(default=None, metadata={"description": "List of machine names that are part of this group."})  # fmt: skip


@define(kw_only=True)
class UpdateGroupBody(ArmModel):
    """
    Adds machines to or removes machines from a group.
    """

    e_tag: Optional[str] = field(default=None, metadata={"description": "For optimistic concurrency control."})
    properties: Optional[GroupBodyProperties] = field(default=None, metadata={"description": "Properties of the group."})  # fmt: skip


@define(kw_only=True)
class VmUptime:
    days_per_month: Optional[float] = field(default=None, metadata={"description": "Number of days in a month for VM uptime."})  # fmt: skip
    hours_per_day: Optional[float] = field(default=None, metadata={"description": "Number of hours per day for VM uptime."})  # fmt: skip


@define(kw_only=True)
class AssessmentProperties:
    azure_location: AzureLocation = field(metadata={"description": "Target Azure location for which the machines should be assessed. These enums are the same as used by Compute API."})  # fmt: skip
    azure_offer_code: AzureOfferCode = field(metadata={"description": "Offer code according to which cost estimation is done."})  # fmt: skip
    ea_subscription_id: Optional[str] = field(default=None, metadata={"description": "Enterprise agreement subscription arm id."})  # fmt: skip
    azure_pricing_tier: AzurePricingTier = field(metadata={"description": "Pricing tier for Size evaluation."})
    azure_storage_redundancy: AzureStorageRedundancy = field(metadata={"description": "Storage Redundancy type offered by Azure."})  # fmt: skip
    scaling_factor: float = field(metadata={"description": "Scaling factor used over utilization data to add a performance buffer for new machines to be created in Azure. Min Value = 1.0, Max value = 1.9, Default = 1.3."})  # fmt: skip
    percentile: Percentile = field(metadata={"description": "Percentile of performance data used to recommend Azure size."})  # fmt: skip
    time_range: TimeRange = field(metadata={"description": "Time range of performance data used to recommend a size."})  # fmt: skip
    perf_data_start_time: Optional[datetime] = field(default=None, metadata={"description": "Start time to consider performance data for assessment"})  # fmt: skip
    perf_data_end_time: Optional[datetime] = field(default=None, metadata={"description": "End time to consider performance data for assessment"})  # fmt: skip
    stage: AssessmentStage = field(metadata={"description": "User configurable setting that describes the status of the assessment."})  # fmt: skip
    currency: Currency = field(metadata={"description": "Currency to report prices in."})
    azure_hybrid_use_benefit: AzureHybridUseBenefit = field(metadata={"description": "AHUB discount on windows virtual machines."})  # fmt: skip
    discount_percentage: float = field(metadata={"description": "Custom discount percentage to be applied on final costs. Can be in the range [0, 100]."})  # fmt: skip
    confidence_rating_in_percentage: Optional[float] = field(default=None, metadata={"description": "Confidence rating percentage for assessment. Can be in the range [0, 100]."})  # fmt: skip
    sizing_criterion: SizingCriterion = field(metadata={"description": "Assessment sizing criterion."})
    reserved_instance: ReservedInstance = field(metadata={"description": "Azure reserved instance."})
    azure_vm_families: List[str] = field(factory=list, metadata={"description": "List of azure VM families."})
    azure_disk_type: AzureDiskType = field(metadata={"description": "Storage type selected for this disk."})
    vm_uptime: VmUptime = field(metadata={"description": "Specify the duration for which the VMs are up in the on-premises environment."})  # fmt: skip
    prices_timestamp: Optional[datetime] = field(default=None, metadata={"description": "Time when the Azure Prices were queried. Date-Time represented in ISO-8601 format."})  # fmt: skip
    created_timestamp: Optional[datetime] = field(default=None, metadata={"description": "Time when this project was created. Date-Time represented in ISO-8601 format."})  # fmt: skip
    updated_timestamp: Optional[datetime] = field(default=None, metadata={"description": "Time when this project was last updated. Date-Time represented in ISO-8601 format."})  # fmt: skip
    monthly_compute_cost: Optional[float] = field(default=None, metadata={"description": "Monthly compute cost estimate for the machines that are part of this assessment as a group, for a 31-day month."})  # fmt: skip
    monthly_bandwidth_cost: Optional[float] = field(default=None, metadata={"description": "Monthly network cost estimate for the machines that are part of this assessment as a group, for a 31-day month."})  # fmt: skip
    monthly_storage_cost: Optional[float] = field(default=None, metadata={"description": "Monthly storage cost estimate for the machines that are part of this assessment as a group, for a 31-day month."})  # fmt: skip
    monthly_premium_storage_cost: Optional[float] = field(default=None, metadata={"description": "Monthly premium storage cost estimate for the machines that are part of this assessment as a group, for a 31-day month."})  # fmt: skip
    monthly_standard_ssd_storage_cost: Optional[float] = field(default=None, metadata={"alias": "monthlyStandardSSDStorageCost", "description": "Monthly standard SSD storage cost estimate for the machines that are part of this assessment as a group, for a 31-day month."})  # fmt: skip
    status: Optional[AssessmentStatus] = field(default=None, metadata={"description": "Whether the assessment has been created and is valid."})  # fmt: skip
    number_of_machines: Optional[int] = field(default=None, metadata={"description": "Number of assessed machines part of this assessment."})  # fmt: skip


@define(kw_only=True)
class Assessment(MigrateResource):
    properties: AssessmentProperties = field(metadata={"description": "Properties of the assessment."})


@define(kw_only=True)
class AssessmentResultList(ListResult):
    value: List[Assessment] = field(factory=list, metadata={"description": "List of assessments."})


@define(kw_only=True)
class VmFamily:
    family_name: Optional[str] = field(default=None, metadata={"description": "Name of the VM family."})
    target_locations: Optional[List[str]] = field(default=None, metadata={"description": "List of Azure regions."})  # fmt: skip
    category: Optional[List[str]] = field(default=None, metadata={"description": "Category of the VM family."})


@define(kw_only=True)
class AssessmentOptionsProperties:
    vm_families: Optional[List[VmFamily]] = field(default=None, metadata={"description": "Dictionary of VM families grouped by vm family name describing the targeted azure locations of VM family and the category of the family."})  # fmt: skip
    reserved_instance_vm_families: Optional[List[str]] = field(default=None, metadata={"description": "List of supported VM Families."})  # fmt: skip
    reserved_instance_supported_locations: Optional[List[str]] = field(default=None, metadata={"description": "List of supported Azure regions for reserved instances."})  # fmt: skip
    reserved_instance_supported_currencies: Optional[List[str]] = field(default=None, metadata={"description": "List of supported currencies for reserved instances."})  # fmt: skip
    reserved_instance_supported_offers: Optional[List[str]] = field(default=None, metadata={"description": "List of supported Azure offer codes for reserved instances."})  # fmt: skip


@define(kw_only=True)
class AssessmentOptions(ArmModel):
    name: Optional[str] = field(default=None, metadata={"description": "Unique name of an assessment options."})
    id: Optional[str] = field(default=None, metadata={"description": "Unique identifier of an assessment options."})  # fmt: skip
    properties: AssessmentOptionsProperties = field(factory=AssessmentOptionsProperties, metadata={"description": "Properties of the assessment options."})  # fmt: skip


@define(kw_only=True)
class AssessmentOptionsResultList(ListResult):
    value: List[AssessmentOptions] = field(factory=list, metadata={"description": "List of assessment options."})


@define(kw_only=True)
class DownloadUrl(ArmModel):
    assessment_report_url: Optional[str] = field(default=None, metadata={"description": "Hyperlink to download report."})  # fmt: skip
    expiration_time: Optional[datetime] = field(default=None, metadata={"description": "Expiry date of download url."})  # fmt: skip


@define(kw_only=True)
class Disk:
    gigabytes_allocated: Optional[float] = field(default=None, metadata={"description": "Gigabytes of storage provisioned for this disk."})  # fmt: skip
    display_name: Optional[str] = field(default=None, metadata={"description": "User friendly name of the disk."})


@define(kw_only=True)
class NetworkAdapter:
    mac_address: Optional[str] = field(default=None, metadata={"description": "MAC Address of the network adapter."})  # fmt: skip
    ip_addresses: Optional[List[str]] = field(default=None, metadata={"description": "List of IP Addresses on the network adapter."})  # fmt: skip
    display_name: Optional[str] = field(default=None, metadata={"description": "User friendly name of the network adapter."})  # fmt: skip


@define(kw_only=True)
class MachineProperties:
    boot_type: Optional[BootType] = field(default=None, metadata={"description": "Boot type of the machine."})
    datacenter_management_server_arm_id: Optional[str] = field(default=None, metadata={"description": "ARM ID of the data center as tracked by the Microsoft.OffAzure."})  # fmt: skip
    discovery_machine_arm_id: Optional[str] = field(default=None, metadata={"description": "ARM ID of the machine as tracked by the Microsoft.OffAzure."})  # fmt: skip
    datacenter_management_server_name: Optional[str] = field(default=None, metadata={"description": "Name of the server hosting the datacenter management solution."})  # fmt: skip
    display_name: Optional[str] = field(default=None, metadata={"description": "User readable name of the machine as defined by the user in their private datacenter."})  # fmt: skip
    megabytes_of_memory: Optional[float] = field(default=None, metadata={"description": "Memory in Megabytes."})
    number_of_cores: Optional[int] = field(default=None, metadata={"description": "Processor count."})
    operating_system_type: Optional[str] = field(default=None, metadata={"description": "Operating System type of the machine."})  # fmt: skip
    operating_system_name: Optional[str] = field(default=None, metadata={"description": "Operating System name of the machine."})  # fmt: skip
    operating_system_version: Optional[str] = field(default=None, metadata={"description": "Operating System version of the machine."})  # fmt: skip
    description: Optional[str] = field(default=None, metadata={"description": "Description of the machine"})
    groups: Optional[List[str]] = field(default=None, metadata={"description": "List of references to the groups that the machine is member of."})  # fmt: skip
    created_timestamp: Optional[datetime] = field(default=None, metadata={"description": "Time when this machine was created. Date-Time represented in ISO-8601 format."})  # fmt: skip
    updated_timestamp: Optional[datetime] = field(default=None, metadata={"description": "Time when this machine was last updated. Date-Time represented in ISO-8601 format."})  # fmt: skip
    disks: Optional[Dict[str, Disk]] = field(default=None, metadata={"description": "Dictionary of disks attached to the machine. Key is ID of disk. Value is a disk object."})  # fmt: skip
    network_adapters: Optional[Dict[str, NetworkAdapter]] = field(default=None, metadata={"description": "Dictionary of network adapters attached to the machine. Key is ID of network adapter. Value is a network adapter object."})  # fmt: skip


@define(kw_only=True)
class Machine(MigrateResource):
    properties: Optional[MachineProperties] = field(default=None, metadata={"description": "Properties of the machine."})  # fmt: skip


@define(kw_only=True)
class MachineResultList(ListResult):
    value: List[Machine] = field(factory=list, metadata={"description": "List of machines."})


@define(kw_only=True)
class AssessedDisk:
    name: Optional[str] = field(default=None, metadata={"description": "Name of the assessed disk."})
    display_name: Optional[str] = field(default=None, metadata={"description": "User friendly name of the assessed disk."})  # fmt: skip
    gigabytes_provisioned: Optional[float] = field(default=None, metadata={"description": "Gigabytes of storage provisioned for this disk."})  # fmt: skip
    megabytes_per_second_of_read: Optional[float] = field(default=None, metadata={"description": "Disk throughput in MegaBytes per second."})  # fmt: skip
    megabytes_per_second_of_write: Optional[float] = field(default=None, metadata={"description": "Disk throughput in MegaBytes per second."})  # fmt: skip
    number_of_read_operations_per_second: Optional[float] = field(default=None, metadata={"description": "Number of read operations per second for the disk."})  # fmt: skip
    number_of_write_operations_per_second: Optional[float] = field(default=None, metadata={"description": "Number of read and write operations per second for the disk."})  # fmt: skip
    monthly_storage_cost: Optional[float] = field(default=None, metadata={"description": "Estimated aggregate storage cost for a 31-day month for this disk."})  # fmt: skip
    recommended_disk_type: Optional[RecommendedDiskType] = field(default=None, metadata={"description": "Storage type selected for this disk."})  # fmt: skip
    recommended_disk_size: Optional[RecommendedDiskSize] = field(default=None, metadata={"description": "Recommended Azure size for the disk, given utilization data and preferences set on Assessment."})  # fmt: skip
    gigabytes_for_recommended_disk_size: Optional[int] = field(default=None, metadata={"description": "Gigabytes of storage provided by the recommended Azure disk size."})  # fmt: skip
    suitability: Optional[CloudSuitability] = field(default=None, metadata={"description": "Whether this disk is suitable for Azure."})  # fmt: skip
    suitability_explanation: Optional[AssessedDiskSuitabilityExplanation] = field(default=None, metadata={"description": "If disk is not suitable to be migrated, this explains the reasons and mitigation steps."})  # fmt: skip
    suitability_detail: Optional[AssessedDiskSuitabilityDetail] = field(default=None, metadata={"description": "If disk is suitable to be migrate but some conditions/checks were not considered while calculating suitability, this explains the details."})  # fmt: skip


@define(kw_only=True)
class AssessedNetworkAdapter:
    mac_address: Optional[str] = field(default=None, metadata={"description": "MAC Address of the network adapter."})  # fmt: skip
    ip_addresses: Optional[List[str]] = field(default=None, metadata={"description": "List of IP Addresses on the network adapter."})  # fmt: skip
    display_name: Optional[str] = field(default=None, metadata={"description": "User friendly name of the assessed network adapter."})  # fmt: skip
    monthly_bandwidth_costs: Optional[float] = field(default=None, metadata={"description": "Monthly cost estimate for network bandwidth used by this network adapter."})  # fmt: skip
    megabytes_per_second_received: Optional[float] = field(default=None, metadata={"description": "Adapter throughput for incoming traffic in MegaBytes per second."})  # fmt: skip
    megabytes_per_second_transmitted: Optional[float] = field(default=None, metadata={"description": "Adapter throughput for outgoing traffic in MegaBytes per second."})  # fmt: skip
    net_gigabytes_transmitted_per_month: Optional[float] = field(default=None, metadata={"description": "Gigabytes transmitted through this adapter each month."})  # fmt: skip
    suitability: Optional[CloudSuitability] = field(default=None, metadata={"description": "Whether this adapter is suitable for Azure."})  # fmt: skip
    suitability_explanation: Optional[AssessedNetworkAdapterSuitabilityExplanation] = field(default=None, metadata={"description": "If network adapter is suitable, this explains the reasons and mitigation steps."})  # fmt: skip
    suitability_detail: Optional[AssessedNetworkAdapterSuitabilityDetail] = field(default=None, metadata={"description": "If network adapter is not suitable, this explains the reasons and mitigation steps."})  # fmt: skip


@define(kw_only=True)
class AssessedMachineProperties:
    boot_type: Optional[BootType] = field(default=None, metadata={"description": "Boot type of the machine."})
    datacenter_machine_arm_id: Optional[str] = field(default=None, metadata={"description": "ARM ID of the discovered machine."})  # fmt: skip
    datacenter_management_server_arm_id: Optional[str] = field(default=None, metadata={"description": "ARM ID of the discovered datacenter."})  # fmt: skip
    datacenter_management_server_name: Optional[str] = field(default=None, metadata={"description": "Name of the server hosting the datacenter management solution."})  # fmt: skip
    description: Optional[str] = field(default=None, metadata={"description": "Description of the machine"})
    display_name: Optional[str] = field(default=None, metadata={"description": "User readable name of the machine as defined by the user in their private datacenter."})  # fmt: skip
    megabytes_of_memory: Optional[float] = field(default=None, metadata={"description": "Memory in Megabytes."})
    number_of_cores: Optional[int] = field(default=None, metadata={"description": "Processor count."})
    operating_system_type: Optional[str] = field(default=None, metadata={"description": "Operating System type of the machine."})  # fmt: skip
    operating_system_name: Optional[str] = field(default=None, metadata={"description": "Operating System name of the machine."})  # fmt: skip
    operating_system_version: Optional[str] = field(default=None, metadata={"description": "Operating System version of the machine."})  # fmt: skip
    monthly_bandwidth_cost: Optional[float] = field(default=None, metadata={"description": "Monthly network cost estimate for the network adapters that are attached to this machine as a group, for a 31-day month."})  # fmt: skip
    monthly_storage_cost: Optional[float] = field(default=None, metadata={"description": "Monthly storage cost estimate for the disks that are attached to this machine as a group, for a 31-day month."})  # fmt: skip
    monthly_premium_storage_cost: Optional[float] = field(default=None, metadata={"description": "Monthly premium storage cost estimate for the disks that are attached to this machine as a group, for a 31-day month."})  # fmt: skip
    monthly_standard_ssd_storage_cost: Optional[float] = field(default=None, metadata={"alias": "monthlyStandardSSDStorageCost", "description": "Monthly standard SSD storage cost estimate for the disks that are attached to this machine as a group, for a 31-day month."})  # fmt: skip
    confidence_rating_in_percentage: Optional[float] = field(default=None, metadata={"description": "Confidence rating percentage for assessment. Can be in the range [0, 100]."})  # fmt: skip
    disks: Optional[Dict[str, AssessedDisk]] = field(default=None, metadata={"description": "Dictionary of disks attached to the machine. Key is ID of disk. Value is a disk object"})  # fmt: skip
    network_adapters: Optional[Dict[str, AssessedNetworkAdapter]] = field(default=None, metadata={"description": "Dictionary of network adapters attached to the machine. Key is name of the adapter. Value is a network adapter object."})  # fmt: skip
    recommended_size: Optional[RecommendedSize] = field(default=None, metadata={"description": "Recommended Azure size for this machine."})  # fmt: skip
    number_of_cores_for_recommended_size: Optional[int] = field(default=None, metadata={"description": "Number of CPU cores in the Recommended Azure VM Size."})  # fmt: skip
    megabytes_of_memory_for_recommended_size: Optional[float] = field(default=None, metadata={"description": "Megabytes of memory in the Recommended Azure VM Size."})  # fmt: skip
    monthly_compute_cost_for_recommended_size: Optional[float] = field(default=None, metadata={"description": "Compute Cost for a 31-day month, if the machine is migrated to Azure with the Recommended Size."})  # fmt: skip
    percentage_cores_utilization: Optional[float] = field(default=None, metadata={"description": "Utilization percentage of the processor core as observed in the private data center, in the Time Range selected on Assessment, reported as the Percentile value based on the percentile number selected in assessment."})  # fmt: skip
    percentage_memory_utilization: Optional[float] = field(default=None, metadata={"description": "Utilization percentage of the memory as observed in the private data center, in the Time Range selected on Assessment, reported as the Percentile value based on the percentile number selected in assessment."})  # fmt: skip
    suitability: Optional[CloudSuitability] = field(default=None, metadata={"description": "Whether machine is suitable for migration to Azure."})  # fmt: skip
    suitability_explanation: Optional[AssessedMachineSuitabilityExplanation] = field(default=None, metadata={"description": "If machine is not ready to be migrated, this explains the reasons and mitigation steps."})  # fmt: skip
    suitability_detail: Optional[AssessedMachineSuitabilityDetail] = field(default=None, metadata={"description": "If machine is not suitable for cloud, this explains the reasons."})  # fmt: skip
    created_timestamp: Optional[datetime] = field(default=None, metadata={"description": "Time when this machine was created. Date-Time represented in ISO-8601 format."})  # fmt: skip
    updated_timestamp: Optional[datetime] = field(default=None, metadata={"description": "Time when this machine was last updated. Date-Time represented in ISO-8601 format."})  # fmt: skip


@define(kw_only=True)
class AssessedMachine(MigrateResource):
    properties: Optional[AssessedMachineProperties] = field(default=None, metadata={"description": "Properties of an assessed machine."})  # fmt: skip


@define(kw_only=True)
class AssessedMachineResultList(ListResult):
    value: List[AssessedMachine] = field(factory=list, metadata={"description": "List of assessed machines."})


@define(kw_only=True)
class CollectorBodyAgentSpnProperties:
    authority: Optional[str] = field(default=None, metadata={"description": "AAD Authority URL which was used to request the token for the service principal."})  # fmt: skip
    application_id: Optional[str] = field(default=None, metadata={"description": "Application/client Id for the service principal with which the on-premise management/data plane components would communicate with our Azure services."})  # fmt: skip
    audience: Optional[str] = field(default=None, metadata={"description": "Intended audience for the service principal."})  # fmt: skip
    object_id: Optional[str] = field(default=None, metadata={"description": "Object Id of the service principal with which the on-premise management/data plane components would communicate with our Azure services."})  # fmt: skip
    tenant_id: Optional[str] = field(default=None, metadata={"description": "Tenant Id for the service principal with which the on-premise management/data plane components would communicate with our Azure services."})  # fmt: skip


@define(kw_only=True)
class CollectorAgentProperties:
    id: Optional[str] = field(default=None, metadata={"description": "The agent id."})
    version: Optional[str] = field(default=None, metadata={"description": "The agent version."})
    last_heartbeat_utc: Optional[datetime] = field(default=None, metadata={"description": "Last time the agent sent a heartbeat."})  # fmt: skip
    spn_details: Optional[CollectorBodyAgentSpnProperties] = field(default=None, metadata={"description": "Service principal details of the agent."})  # fmt: skip


@define(kw_only=True)
class CollectorProperties:
    discovery_site_id: Optional[str] = field(default=None, metadata={"description": "The ARM id of the discovery service site."})  # fmt: skip
    created_timestamp: Optional[str] = field(default=None, metadata={"description": "Time when this collector was created. Date-Time represented in ISO-8601 format."})  # fmt: skip
    updated_timestamp: Optional[str] = field(default=None, metadata={"description": "Time when this collector was updated. Date-Time represented in ISO-8601 format."})  # fmt: skip
    agent_properties: Optional[CollectorAgentProperties] = field(default=None, metadata={"description": "Properties of the collector agent."})  # fmt: skip


@define(kw_only=True)
class HyperVCollector(MigrateResource):
    properties: Optional[CollectorProperties] = field(default=None, metadata={"description": "Properties of the collector."})  # fmt: skip


@define(kw_only=True)
class HyperVCollectorList(ListResult):
    value: List[HyperVCollector] = field(factory=list, metadata={"description": "List of Hyper-V collectors."})


@define(kw_only=True)
class ServerCollector(MigrateResource):
    properties: Optional[CollectorProperties] = field(default=None, metadata={"description": "Properties of the collector."})  # fmt: skip


@define(kw_only=True)
class ServerCollectorList(ListResult):
    value: List[ServerCollector] = field(factory=list, metadata={"description": "List of server collectors."})


@define(kw_only=True)
class VMwareCollector(MigrateResource):
    properties: Optional[CollectorProperties] = field(default=None, metadata={"description": "Properties of the collector."})  # fmt: skip


@define(kw_only=True)
class VMwareCollectorList(ListResult):
    value: List[VMwareCollector] = field(factory=list, metadata={"description": "List of VMware collectors."})


@define(kw_only=True)
class ImportCollectorProperties:
    discovery_site_id: Optional[str] = field(default=None, metadata={"description": "The ARM id of the discovery service site."})  # fmt: skip
    created_timestamp: Optional[str] = field(default=None, metadata={"description": "Time when this collector was created. Date-Time represented in ISO-8601 format."})  # fmt: skip
    updated_timestamp: Optional[str] = field(default=None, metadata={"description": "Time when this collector was updated. Date-Time represented in ISO-8601 format."})  # fmt: skip


@define(kw_only=True)
class ImportCollector(MigrateResource):
    properties: Optional[ImportCollectorProperties] = field(default=None, metadata={"description": "Properties of the collector."})  # fmt: skip


@define(kw_only=True)
class ImportCollectorList(ListResult):
    value: List[ImportCollector] = field(factory=list, metadata={"description": "List of import collectors."})


@define(kw_only=True)
class Operation:
    name: Optional[str] = field(default=None, metadata={"description": "Name of the operation."})
    display: Optional[OperationDisplay] = field(default=None, metadata={"description": "Displayable properties of the operation."})  # fmt: skip
    origin: Optional[str] = field(default=None, metadata={"description": "Origin of the operation."})


@define(kw_only=True)
class OperationResultList(ListResult):
    value: List[Operation] = field(factory=list, metadata={"description": "List of operations."})
