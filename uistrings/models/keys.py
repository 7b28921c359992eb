"""Symbolic identifiers for the project-property UI strings."""

from enum import Enum


class StringKey(str, Enum):
    """Closed set of UI string keys.

    Each value is the entry name in the resource bundle. The neutral
    bundle (``uistrings/resources/ui_strings.yaml``) must define every
    member; ``uistrings check`` reports any drift.
    """

    # Property page captions
    DEBUG_CAPTION = "DebugCaption"
    BUILD_CAPTION = "BuildCaption"
    GENERAL_CAPTION = "GeneralCaption"
    APPLICATION = "Application"
    PROJECT = "Project"
    WRAPPER_ASSEMBLY = "WrapperAssembly"
    CODE_GENERATION = "CodeGeneration"
    ERRORS_AND_WARNINGS = "ErrorsAndWarnings"
    OUTPUTS = "Outputs"
    START_ACTION = "StartAction"
    START_OPTIONS = "StartOptions"
    ADVANCED = "Advanced"
    MISC = "Misc"

    # Property labels and descriptions
    ASSEMBLY_NAME = "AssemblyName"
    ASSEMBLY_NAME_DESCRIPTION = "AssemblyNameDescription"
    OUTPUT_TYPE = "OutputType"
    OUTPUT_TYPE_DESCRIPTION = "OutputTypeDescription"
    DEFAULT_NAMESPACE = "DefaultNamespace"
    DEFAULT_NAMESPACE_DESCRIPTION = "DefaultNamespaceDescription"
    STARTUP_OBJECT = "StartupObject"
    STARTUP_OBJECT_DESCRIPTION = "StartupObjectDescription"
    APPLICATION_ICON = "ApplicationIcon"
    APPLICATION_ICON_DESCRIPTION = "ApplicationIconDescription"
    PROJECT_FILE = "ProjectFile"
    PROJECT_FILE_DESCRIPTION = "ProjectFileDescription"
    PROJECT_FOLDER = "ProjectFolder"
    PROJECT_FOLDER_DESCRIPTION = "ProjectFolderDescription"
    OUTPUT_FILE = "OutputFile"
    OUTPUT_FILE_DESCRIPTION = "OutputFileDescription"
    WRAPPER_ASSEMBLY_KEY_FILE = "WrapperAssemblyKeyFile"
    WRAPPER_ASSEMBLY_KEY_FILE_DESCRIPTION = "WrapperAssemblyKeyFileDescription"
    WRAPPER_ASSEMBLY_KEY_NAME = "WrapperAssemblyKeyName"
    WRAPPER_ASSEMBLY_KEY_NAME_DESCRIPTION = "WrapperAssemblyKeyNameDescription"
    DEFINE_CONSTANTS = "DefineConstants"
    DEFINE_CONSTANTS_DESCRIPTION = "DefineConstantsDescription"
    OPTIMIZE_CODE = "OptimizeCode"
    OPTIMIZE_CODE_DESCRIPTION = "OptimizeCodeDescription"
    CHECK_ARITHMETIC_OVERFLOW = "CheckArithmeticOverflow"
    CHECK_ARITHMETIC_OVERFLOW_DESCRIPTION = "CheckArithmeticOverflowDescription"
    ALLOW_UNSAFE_CODE = "AllowUnsafeCode"
    ALLOW_UNSAFE_CODE_DESCRIPTION = "AllowUnsafeCodeDescription"
    WARNING_LEVEL = "WarningLevel"
    WARNING_LEVEL_DESCRIPTION = "WarningLevelDescription"
    TREAT_WARNINGS_AS_ERRORS = "TreatWarningsAsErrors"
    TREAT_WARNINGS_AS_ERRORS_DESCRIPTION = "TreatWarningsAsErrorsDescription"
    OUTPUT_PATH = "OutputPath"
    OUTPUT_PATH_DESCRIPTION = "OutputPathDescription"
    XML_DOCUMENTATION_FILE = "XMLDocumentationFile"
    XML_DOCUMENTATION_FILE_DESCRIPTION = "XMLDocumentationFileDescription"
    GENERATE_DEBUGGING_INFORMATION = "GenerateDebuggingInformation"
    GENERATE_DEBUGGING_INFORMATION_DESCRIPTION = "GenerateDebuggingInformationDescription"
    REGISTER_FOR_COM_INTEROP = "RegisterForCOMInterop"
    REGISTER_FOR_COM_INTEROP_DESCRIPTION = "RegisterForCOMInteropDescription"
    DEBUG_MODE = "DebugMode"
    DEBUG_MODE_DESCRIPTION = "DebugModeDescription"
    START_APPLICATION = "StartApplication"
    START_APPLICATION_DESCRIPTION = "StartApplicationDescription"
    START_URL = "StartURL"
    START_URL_DESCRIPTION = "StartURLDescription"
    START_PAGE = "StartPage"
    START_PAGE_DESCRIPTION = "StartPageDescription"
    COMMAND_LINE_ARGUMENTS = "CommandLineArguments"
    COMMAND_LINE_ARGUMENTS_DESCRIPTION = "CommandLineArgumentsDescription"
    WORKING_DIRECTORY = "WorkingDirectory"
    WORKING_DIRECTORY_DESCRIPTION = "WorkingDirectoryDescription"
    USE_INTERNET_EXPLORER = "UseInternetExplorer"
    USE_INTERNET_EXPLORER_DESCRIPTION = "UseInternetExplorerDescription"
    ENABLE_REMOTE_DEBUGGING = "EnableRemoteDebugging"
    ENABLE_REMOTE_DEBUGGING_DESCRIPTION = "EnableRemoteDebuggingDescription"
    REMOTE_DEBUG_MACHINE = "RemoteDebugMachine"
    REMOTE_DEBUG_MACHINE_DESCRIPTION = "RemoteDebugMachineDescription"
    INCREMENTAL_BUILD = "IncrementalBuild"
    INCREMENTAL_BUILD_DESCRIPTION = "IncrementalBuildDescription"
    BASE_ADDRESS = "BaseAddress"
    BASE_ADDRESS_DESCRIPTION = "BaseAddressDescription"
    BUILD_ACTION = "BuildAction"
    BUILD_ACTION_DESCRIPTION = "BuildActionDescription"
    CUSTOM_TOOL = "CustomTool"
    CUSTOM_TOOL_DESCRIPTION = "CustomToolDescription"
    CUSTOM_TOOL_NAMESPACE = "CustomToolNamespace"
    CUSTOM_TOOL_NAMESPACE_DESCRIPTION = "CustomToolNamespaceDescription"
    FILE_NAME = "FileName"
    FILE_NAME_DESCRIPTION = "FileNameDescription"
    FULL_PATH = "FullPath"
    FULL_PATH_DESCRIPTION = "FullPathDescription"
    FILE_ALIGNMENT = "FileAlignment"
    FILE_ALIGNMENT_DESCRIPTION = "FileAlignmentDescription"

    # Target frameworks
    V1 = "v1"
    V11 = "v11"
    V12 = "v12"
    CLI1 = "cli1"

    # Output types
    EXE = "Exe"
    LIBRARY = "Library"
    WIN_EXE = "WinExe"

    # Build actions
    COMPILE = "Compile"
    CONTENT = "Content"
    EMBEDDED_RESOURCE = "EmbeddedResource"
    NONE = "None"

    # Debug modes
    PROGRAM = "Program"
    URL = "URL"

    # Status messages
    MAX_ERRORS_REACHED = "MaxErrorsReached"
    BRACE_MATCH_STATUS = "BraceMatchStatus"

    # Target platform
    TARGET_PLATFORM = "TargetPlatform"
    TARGET_PLATFORM_DESCRIPTION = "TargetPlatformDescription"
    TARGET_PLATFORM_LOCATION = "TargetPlatformLocation"
    TARGET_PLATFORM_LOCATION_DESCRIPTION = "TargetPlatformLocationDescription"

    @classmethod
    def lookup(cls, name: str) -> "StringKey | None":
        """Find a key by entry name (``OutputType``) or member name (``OUTPUT_TYPE``)."""
        try:
            return cls(name)
        except ValueError:
            return cls.__members__.get(name)
