#!/usr/bin/env python3
"""
BulkCrypt - Concurrent AES-GCM encryption/decryption of files and directory trees.

Overview:
- Encrypts every regular file under a path with AES-GCM (128/192/256 by key length).
- Processes files concurrently: one thread per file by default, or a bounded pool.
- Writes `<file>.enc` next to each source and optionally removes the original.
- Decrypts `<file>.enc` back to `<file>` and always removes the `.enc` source.
- Verifies authenticity before any plaintext is written.
- Rotating log file plus colored console output.

Dependencies:
- Python 3.9+
- cryptography (pip install cryptography)
- colorama (pip install colorama)

Usage:
    python bulkcrypt.py --encrypt --key mysecret ./data
    python bulkcrypt.py --decrypt --key-file ./key.txt ./data
    python bulkcrypt.py --encrypt --key mysecret --no-delete-original ./report.pdf
    python bulkcrypt.py --encrypt --key mysecret --workers 8 --verbose ./data

File Format: [nonce (12 bytes)][ciphertext || GCM tag (16 bytes)]

Key Handling:
- The key string is UTF-8 encoded and used directly as the AES key.
- Shorter keys are right-padded with ASCII '0' to the next of 16, 24 or 32 bytes.
- Keys longer than 32 bytes are truncated to their first 32 bytes.
- WARNING: this is NOT a key derivation function. A short or guessable key
  gives weak protection; padding with a fixed character adds no secrecy.

"""
import argparse
import logging
import os
import secrets
import sys
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from contextlib import suppress
from dataclasses import dataclass
from enum import Enum
from importlib import metadata
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from colorama import init, Fore, Style

# Initialize colorama for colored console output
init(autoreset=True)

# Program metadata
PROGRAM_VERSION = "1.0"
PROGRAM_NAME = "BulkCrypt"

logger = logging.getLogger("bulkcrypt")


@dataclass(frozen=True)
class CryptConfig:
    """Configuration constants for BulkCrypt."""
    ENCRYPTED_SUFFIX: str = ".enc"  # Suffix appended on encryption, stripped on decryption
    NONCE_LENGTH: int = 12  # Bytes for AES-GCM nonce (96-bit, GCM standard)
    TAG_LENGTH: int = 16  # Bytes for AES-GCM authentication tag
    KEY_SIZES: Tuple[int, ...] = (16, 24, 32)  # AES-128/192/256
    KEY_PAD_BYTE: bytes = b'0'  # Filler for short keys
    LOG_FILE: str = 'bulkcrypt.log'
    LOG_MAX_SIZE: int = 10 * 1024 * 1024  # Max log file size (10 MB)
    LOG_BACKUP_COUNT: int = 3  # Number of backup log files


class Mode(Enum):
    ENCRYPT = 'encrypt'
    DECRYPT = 'decrypt'


@dataclass(frozen=True)
class FileTask:
    """One pending transform of a single file."""
    source: Path
    mode: Mode
    delete_original: bool


@dataclass
class WalkReport:
    """Outcome counts of a directory walk."""
    root: Path
    total: int = 0
    succeeded: int = 0
    elapsed: float = 0.0

    @property
    def failed(self) -> int:
        return self.total - self.succeeded


class CryptError(Exception):
    """Base class for BulkCrypt errors."""


class ConfigurationError(CryptError):
    """Invalid command-line configuration; nothing is processed."""


class FileTaskError(CryptError):
    """A per-file I/O failure (open, create, remove)."""


class CipherError(CryptError):
    """Cipher construction, nonce generation or sealing failed."""


class DecryptionError(CryptError):
    """Authentication failed: wrong key, tampered or truncated data."""


class TraversalError(CryptError):
    """The directory walk could not continue."""


def normalize_key(key: str, config: CryptConfig = CryptConfig()) -> bytes:
    """
    Pad or truncate a key string to a valid AES key length.

    The key is UTF-8 encoded and padded with ASCII '0' up to the next of
    16, 24 or 32 bytes, or truncated to 32 bytes when longer. This is a
    compatibility rule, not a key derivation function.

    Args:
        key: Key string of any length.
        config: CryptConfig instance with the valid key sizes and pad byte.

    Returns:
        bytes: Key of exactly 16, 24 or 32 bytes.
    """
    raw = key.encode('utf-8')
    max_size = config.KEY_SIZES[-1]
    if len(raw) > max_size:
        return raw[:max_size]
    for size in config.KEY_SIZES:
        if len(raw) <= size:
            return raw + config.KEY_PAD_BYTE * (size - len(raw))
    return raw


def key_was_padded(key: str, config: CryptConfig = CryptConfig()) -> bool:
    """Return True if normalize_key() had to pad the key."""
    length = len(key.encode('utf-8'))
    return length < config.KEY_SIZES[-1] and length not in config.KEY_SIZES


def configure_logging(log_file: str, debug: bool = False) -> logging.Logger:
    """
    Attach a rotating file handler to the BulkCrypt logger.

    Handlers from a previous call are removed first so repeated runs in the
    same process do not duplicate log lines.
    """
    config = CryptConfig()
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    log_handler = RotatingFileHandler(
        log_file,
        maxBytes=config.LOG_MAX_SIZE,
        backupCount=config.LOG_BACKUP_COUNT,
        encoding='utf-8'
    )
    log_handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
    logger.addHandler(log_handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.propagate = False
    return logger


class CryptFileProcessor:
    """Encrypts or decrypts single files with AES-GCM."""
    def __init__(self, config: CryptConfig, key: bytes, verbose: bool = False, dry_run: bool = False):
        """
        Initialize the file processor.

        Args:
            config: CryptConfig instance with program constants.
            key: Normalized key (16, 24 or 32 bytes), shared read-only by all tasks.
            verbose: If True, enable verbose console output.
            dry_run: If True, report what would happen without writing or removing files.
        """
        self.config = config
        self.key = key
        self.verbose = verbose
        self.dry_run = dry_run
        self.logger = logger
        self.logger.debug(
            f"Initialized CryptFileProcessor: key_length={len(key)}, verbose={verbose}, dry_run={dry_run}"
        )

    def _new_cipher(self) -> AESGCM:
        try:
            return AESGCM(self.key)
        except (ValueError, TypeError) as e:
            raise CipherError(f"Error creating cipher: {e}")

    def _generate_nonce(self) -> bytes:
        try:
            return secrets.token_bytes(self.config.NONCE_LENGTH)
        except (OSError, NotImplementedError) as e:
            raise CipherError(f"Error generating nonce: {e}")

    def _read_file(self, file_path: Path) -> bytes:
        """
        Read a whole file into memory.

        Raises:
            FileTaskError: If the file is missing, not a regular file or unreadable.
        """
        try:
            if not file_path.is_file():
                raise FileNotFoundError(f"{file_path} is not a file")
            with file_path.open('rb') as f:
                data = f.read()
        except OSError as e:
            raise FileTaskError(f"Error opening file {file_path}: {e}")
        self.logger.debug(f"Read {len(data)} bytes from {file_path}")
        if self.verbose:
            print(f"{Fore.CYAN}Read {len(data)} bytes from {file_path}{Style.RESET_ALL}")
        return data

    def _write_file(self, file_path: Path, data: bytes) -> None:
        """
        Write data atomically: a hidden temporary sibling is written and then
        renamed over the target, so a failed write never leaves partial output.

        Raises:
            FileTaskError: If the output cannot be created or written.
        """
        temp_path = file_path.with_name(f".{file_path.name}.{secrets.token_hex(4)}.tmp")
        if file_path.exists():
            self.logger.warning(f"Overwriting existing file: {file_path}")
            print(f"{Fore.YELLOW}Warning: Overwriting {file_path}{Style.RESET_ALL}")
        try:
            with temp_path.open('wb') as f:
                f.write(data)
            temp_path.replace(file_path)
        except OSError as e:
            with suppress(OSError):
                temp_path.unlink()
            raise FileTaskError(f"Error creating file {file_path}: {e}")
        self.logger.debug(f"Wrote {len(data)} bytes to {file_path}")
        if self.verbose:
            print(f"{Fore.CYAN}Wrote {len(data)} bytes to {file_path}{Style.RESET_ALL}")

    def _remove_file(self, file_path: Path, label: str) -> bool:
        """Remove a file, reporting but not raising on failure."""
        if self.dry_run:
            self.logger.info(f"Dry run: Would delete {label} file {file_path}")
            print(f"{Fore.YELLOW}Dry run: Would delete {label} file {file_path}{Style.RESET_ALL}")
            return True
        try:
            file_path.unlink()
        except OSError as e:
            self.logger.error(f"Error deleting {label} file {file_path}: {e}")
            print(f"{Fore.RED}Error deleting {label} file {file_path}: {e}{Style.RESET_ALL}")
            return False
        self.logger.info(f"{label.capitalize()} file {file_path} deleted")
        print(f"{Fore.GREEN}{label.capitalize()} file {file_path} deleted{Style.RESET_ALL}")
        return True

    def encrypted_path(self, file_path: Path) -> Path:
        return file_path.with_name(file_path.name + self.config.ENCRYPTED_SUFFIX)

    def decrypted_path(self, file_path: Path) -> Path:
        """
        Strip the encrypted suffix. The path must carry it.

        Raises:
            FileTaskError: If nothing is left of the name once the suffix is stripped.
        """
        stem = file_path.name[:-len(self.config.ENCRYPTED_SUFFIX)]
        if not stem:
            raise FileTaskError(
                f"Cannot derive a decrypted file name from {file_path}: name is only '{self.config.ENCRYPTED_SUFFIX}'"
            )
        return file_path.with_name(stem)

    def encrypt_file(self, input_file, delete_original: bool = True) -> Path:
        """
        Encrypt a file to `<input_file>.enc`.

        Args:
            input_file: Path to the plaintext file.
            delete_original: If True, remove the source after a successful write.

        Returns:
            Path: The encrypted artifact path.

        Raises:
            FileTaskError: If the source cannot be read or the output cannot be created.
            CipherError: If the cipher or nonce cannot be produced.
        """
        input_path = Path(input_file)
        start_time = time.time()
        self.logger.info(f"Encrypting file: {input_path}")
        print(f"{Fore.CYAN}Encrypting file: {input_path}{Style.RESET_ALL}")

        data = self._read_file(input_path)
        aesgcm = self._new_cipher()
        nonce = self._generate_nonce()
        try:
            ciphertext = aesgcm.encrypt(nonce, data, None)
        except OverflowError as e:
            raise CipherError(f"Error encrypting {input_path}: {e}")

        output_file = self.encrypted_path(input_path)
        if self.dry_run:
            self.logger.info(
                f"Dry run: Would encrypt {input_path} to {output_file} ({len(nonce) + len(ciphertext)} bytes)"
            )
            print(f"{Fore.YELLOW}Dry run: Would encrypt {input_path} to {output_file}{Style.RESET_ALL}")
        else:
            self._write_file(output_file, nonce + ciphertext)
            elapsed_time = time.time() - start_time
            self.logger.info(f"Encrypted {input_path} to {output_file} in {elapsed_time:.2f}s")
            print(f"{Fore.GREEN}File encrypted and saved as {output_file}{Style.RESET_ALL}")

        if delete_original:
            self._remove_file(input_path, 'original')
        return output_file

    def decrypt_file(self, encrypted_file) -> Path:
        """
        Decrypt `<name>.enc` to `<name>` and remove the `.enc` source.

        The source is removed after every successful decryption, whatever the
        delete-original setting of the run.

        Args:
            encrypted_file: Path to the encrypted artifact.

        Returns:
            Path: The decrypted file path.

        Raises:
            FileTaskError: If the source cannot be read or the output cannot be created.
            CipherError: If the cipher cannot be constructed.
            DecryptionError: If authentication fails or the artifact is truncated.
        """
        encrypted_path = Path(encrypted_file)
        start_time = time.time()
        self.logger.info(f"Decrypting file: {encrypted_path}")
        print(f"{Fore.CYAN}Decrypting file: {encrypted_path}{Style.RESET_ALL}")

        output_file = self.decrypted_path(encrypted_path)
        data = self._read_file(encrypted_path)
        aesgcm = self._new_cipher()

        minimum = self.config.NONCE_LENGTH + self.config.TAG_LENGTH
        if len(data) < minimum:
            raise DecryptionError(
                f"File {encrypted_path} too short ({len(data)} bytes, expected at least {minimum})"
            )
        nonce = data[:self.config.NONCE_LENGTH]
        ciphertext = data[self.config.NONCE_LENGTH:]
        try:
            plaintext = aesgcm.decrypt(nonce, ciphertext, None)
        except InvalidTag:
            raise DecryptionError(f"Invalid key or corrupted data in {encrypted_path}")

        if self.dry_run:
            self.logger.info(f"Dry run: Would decrypt {encrypted_path} to {output_file} ({len(plaintext)} bytes)")
            print(f"{Fore.YELLOW}Dry run: Would decrypt {encrypted_path} to {output_file}{Style.RESET_ALL}")
        else:
            self._write_file(output_file, plaintext)
            elapsed_time = time.time() - start_time
            self.logger.info(f"Decrypted {encrypted_path} to {output_file} in {elapsed_time:.2f}s")
            print(f"{Fore.GREEN}File decrypted and saved as {output_file}{Style.RESET_ALL}")

        self._remove_file(encrypted_path, 'encrypted')
        return output_file

    def process_file(self, task: FileTask) -> bool:
        """
        Run one task, reporting any failure instead of raising it.

        Returns:
            bool: True if the output file was produced.
        """
        try:
            if task.mode is Mode.ENCRYPT:
                self.encrypt_file(task.source, task.delete_original)
            elif not task.source.name.endswith(self.config.ENCRYPTED_SUFFIX):
                self.logger.warning(f"Skipping {task.source}: Not an encrypted file")
                print(f"{Fore.YELLOW}Skipping {task.source}: Not an encrypted file{Style.RESET_ALL}")
                return False
            else:
                self.decrypt_file(task.source)
            return True
        except DecryptionError as e:
            self.logger.error(f"Decryption failed for {task.source}: {e}")
            print(f"{Fore.RED}Decryption failed for {task.source}: {e}{Style.RESET_ALL}")
        except CryptError as e:
            self.logger.error(f"{task.mode.value.capitalize()} failed for {task.source}: {e}")
            print(f"{Fore.RED}Error processing {task.source}: {e}{Style.RESET_ALL}")
        except Exception as e:
            self.logger.exception(f"Unexpected error processing {task.source}: {e}")
            print(f"{Fore.RED}Unexpected error processing {task.source}: {e}{Style.RESET_ALL}")
        return False


class CryptTreeWalker:
    """Runs a CryptFileProcessor task for every regular file under a directory."""
    def __init__(
        self, processor: CryptFileProcessor, workers: Optional[int] = None, exclude: Sequence = ()
    ):
        """
        Args:
            processor: Processor shared by every task.
            workers: None for one thread per file, otherwise the size of a bounded pool.
            exclude: Paths never handed to the processor, such as the live log file.
        """
        self.processor = processor
        self.workers = workers
        self.exclude = {os.path.realpath(p) for p in exclude}
        self.logger = logger

    def walk(self, root, mode: Mode, delete_original: bool) -> WalkReport:
        """
        Process every regular file under root concurrently and wait for all of them.

        Raises:
            TraversalError: If a directory cannot be listed or no further
                thread can be started. Tasks already started are joined
                before the error propagates.
        """
        root_path = Path(root)
        report = WalkReport(root=root_path)
        results: List[bool] = []
        results_lock = threading.Lock()
        threads: List[threading.Thread] = []
        executor = ThreadPoolExecutor(max_workers=self.workers) if self.workers else None
        start_time = time.time()

        def run_task(task: FileTask) -> None:
            ok = self.processor.process_file(task)
            with results_lock:
                results.append(ok)

        def on_error(error: OSError) -> None:
            raise TraversalError(f"Error walking the directory {error.filename}: {error}") from error

        self.logger.info(f"Walking {root_path} ({mode.value}, workers={self.workers or 'unbounded'})")
        try:
            for dirpath, _dirnames, filenames in os.walk(root_path, onerror=on_error):
                for name in filenames:
                    path = Path(dirpath) / name
                    if not path.is_file():
                        self.logger.warning(f"Skipping {path}: Not a regular file")
                        print(f"{Fore.YELLOW}Skipping {path}: Not a regular file{Style.RESET_ALL}")
                        continue
                    if os.path.realpath(path) in self.exclude:
                        self.logger.warning(f"Skipping {path}: In use by {PROGRAM_NAME}")
                        print(f"{Fore.YELLOW}Skipping {path}: In use by {PROGRAM_NAME}{Style.RESET_ALL}")
                        continue
                    task = FileTask(path, mode, delete_original)
                    report.total += 1
                    if executor:
                        executor.submit(run_task, task)
                    else:
                        thread = threading.Thread(target=run_task, args=(task,), name=f"crypt-{report.total}")
                        try:
                            thread.start()
                        except RuntimeError as e:
                            report.total -= 1
                            raise TraversalError(f"Error starting task for {path}: {e}") from e
                        threads.append(thread)
        finally:
            for thread in threads:
                thread.join()
            if executor:
                executor.shutdown(wait=True)
            report.succeeded = sum(results)
            report.elapsed = time.time() - start_time
            self.logger.info(
                f"Completed {mode.value} in {root_path}: processed {report.succeeded}/{report.total} files "
                f"in {report.elapsed:.2f}s"
            )
        return report


def log_file_paths(log_file, config: CryptConfig = CryptConfig()) -> List[Path]:
    """
    Return the live log file, its rotation backups and the encrypted names of
    all of them. None of these may be processed while the log is open.
    """
    base = Path(log_file).expanduser()
    names = [base.name] + [f"{base.name}.{i}" for i in range(1, config.LOG_BACKUP_COUNT + 1)]
    paths = [base.with_name(name) for name in names]
    return paths + [base.with_name(name + config.ENCRYPTED_SUFFIX) for name in names]


def _dependency_versions() -> str:
    versions = []
    for name in ("cryptography", "colorama"):
        try:
            versions.append(f"{name}={metadata.version(name)}")
        except metadata.PackageNotFoundError:
            versions.append(f"{name}=unknown")
    return ", ".join(versions)


class CryptCLI:
    """Command-line interface for BulkCrypt."""
    def __init__(self):
        self.config = CryptConfig()
        self.logger = logger

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog='bulkcrypt',
            description=(
                f"{PROGRAM_NAME}: Concurrent AES-GCM encryption/decryption of a file or directory tree.\n"
                f"Version {PROGRAM_VERSION}\n"
                "Each file becomes <file>.enc ([12-byte nonce][ciphertext + 16-byte tag]).\n"
                "The key is padded with '0' or truncated to 16/24/32 bytes; it is NOT a password KDF."
            ),
            epilog=(
                "Examples:\n"
                "  Encrypt a folder: bulkcrypt --encrypt --key mysecret ./data\n"
                "  Keep originals: bulkcrypt --encrypt --key mysecret --no-delete-original ./data\n"
                "  Decrypt a file: bulkcrypt --decrypt --key-file ./key.txt ./data/report.pdf.enc\n"
                "  Bounded pool: bulkcrypt --encrypt --key mysecret --workers 8 ./data"
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter
        )
        parser.add_argument('path', nargs='?', help='File or directory to process')
        parser.add_argument('-k', '--key', type=str, help='The encryption key')
        parser.add_argument('--key-file', type=str, help='File containing the encryption key (UTF-8)')
        parser.add_argument('--encrypt', action='store_true', help='Encrypt a file or directory')
        parser.add_argument('--decrypt', action='store_true', help='Decrypt a file or directory')
        parser.add_argument(
            '-d', '--delete-original', action=argparse.BooleanOptionalAction, default=True,
            help='Delete the original file after encryption (default: yes)'
        )
        parser.add_argument('--workers', type=int, help='Limit concurrent file tasks (default: one per file)')
        parser.add_argument('--dry-run', action='store_true', help='Simulate operations without writing files')
        parser.add_argument('--verbose', action='store_true', help='Enable verbose console output')
        parser.add_argument('--debug', action='store_true', help='Enable debug logging')
        parser.add_argument('--log-file', type=str, default=self.config.LOG_FILE, help='Log file path')
        parser.add_argument('--version', action='version', version=f"{PROGRAM_NAME} {PROGRAM_VERSION}")
        return parser

    def _read_key_from_file(self, file_path: str) -> str:
        """
        Read a key from a file, stripping whitespace.

        Raises:
            ConfigurationError: If the file cannot be read.
        """
        file_path = Path(file_path)
        try:
            with file_path.open('r', encoding='utf-8') as f:
                key = f.read().strip()
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Error reading key file {file_path}: {e}")
        self.logger.debug(f"Read key from file: {file_path} (length: {len(key)} characters)")
        return key

    def _validate(self, args: argparse.Namespace) -> Tuple[str, Mode, Path]:
        """Check flags and return (key, mode, path); raise ConfigurationError otherwise."""
        if args.key and args.key_file:
            raise ConfigurationError("Specify either --key or --key-file, not both")
        key = self._read_key_from_file(args.key_file) if args.key_file else args.key
        if not key:
            raise ConfigurationError("encryption key must be provided")
        if not args.encrypt and not args.decrypt:
            raise ConfigurationError("either --encrypt or --decrypt must be specified")
        if args.encrypt and args.decrypt:
            raise ConfigurationError("cannot specify both --encrypt and --decrypt")
        if not args.path:
            raise ConfigurationError("file or directory path must be provided")
        if args.workers is not None and args.workers < 1:
            raise ConfigurationError("--workers must be at least 1")
        path = Path(args.path).expanduser()
        try:
            path.stat()
        except OSError as e:
            raise ConfigurationError(f"Error stating file or directory {path}: {e}")
        return key, Mode.ENCRYPT if args.encrypt else Mode.DECRYPT, path

    def run(self, argv: Optional[Sequence[str]] = None) -> int:
        """Parse command-line arguments and execute the program. Returns the exit status."""
        args = self.build_parser().parse_args(argv)
        configure_logging(args.log_file, args.debug)
        self.logger.info(f"Starting {PROGRAM_NAME} v{PROGRAM_VERSION}, dependencies: {_dependency_versions()}")

        try:
            key, mode, path = self._validate(args)
        except ConfigurationError as e:
            self.logger.error(f"Configuration error: {e}")
            print(f"{Fore.RED}Error: {e}{Style.RESET_ALL}")
            return 1

        normalized = normalize_key(key, self.config)
        if key_was_padded(key, self.config):
            warning = f"Key padded with '0' to {len(normalized)} bytes; this is not a key derivation function"
            self.logger.warning(warning)
            print(f"{Fore.YELLOW}Warning: {warning}{Style.RESET_ALL}")
        self.logger.info(f"Using {len(normalized)}-byte key (AES-{len(normalized) * 8}-GCM)")
        print(f"{Fore.CYAN}Using {len(normalized)}-byte key (AES-{len(normalized) * 8}-GCM){Style.RESET_ALL}")

        # Decryption always removes its source; the flag only applies to encryption
        delete_original = args.delete_original if mode is Mode.ENCRYPT else False
        processor = CryptFileProcessor(self.config, normalized, args.verbose, args.dry_run)

        log_paths = log_file_paths(args.log_file, self.config)
        if path.is_dir():
            walker = CryptTreeWalker(processor, args.workers, exclude=log_paths)
            try:
                report = walker.walk(path, mode, delete_original)
            except TraversalError as e:
                self.logger.error(str(e))
                print(f"{Fore.RED}{e}{Style.RESET_ALL}")
                return 0
            color = Fore.GREEN if report.failed == 0 else Fore.YELLOW
            print(
                f"{color}Completed {mode.value} in {path}: "
                f"processed {report.succeeded}/{report.total} files in {report.elapsed:.2f}s{Style.RESET_ALL}"
            )
        elif os.path.realpath(path) in {os.path.realpath(p) for p in log_paths}:
            self.logger.warning(f"Skipping {path}: In use by {PROGRAM_NAME}")
            print(f"{Fore.YELLOW}Skipping {path}: In use by {PROGRAM_NAME}{Style.RESET_ALL}")
        else:
            processor.process_file(FileTask(path, mode, delete_original))
        return 0


def main() -> None:
    sys.exit(CryptCLI().run())


if __name__ == "__main__":
    main()
