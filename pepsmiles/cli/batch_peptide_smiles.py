#!/usr/bin/env python
"""
Batch SMILES generation for peptide sequences.

Input is a tab-separated file, one peptide per line:

    id <TAB> sequence [<TAB> cross_links [<TAB> cyclization]]

``cross_links`` is a ``;``-separated list such as ``lan(1,5);cystine(3,9)``
and ``cyclization`` is ``none`` or ``head-to-tail``. Blank lines, lines
starting with ``#`` and a header line starting with ``id`` are skipped.

Usage:
    pepsmiles-batch --input peptides.tsv --output_dir out/
    pepsmiles-batch --input peptides.tsv --output_dir out/ --canonical
    pepsmiles-batch --input peptides.tsv --output_dir out/ --num_workers 4
    pepsmiles-batch --input peptides.tsv --output_dir out/ --resume
"""

import argparse
import logging
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import List, NamedTuple, Optional, Set, Tuple

from rdkit import RDLogger
from tqdm import tqdm

from pepsmiles import Peptide, PepsmilesError
from pepsmiles.chem import canonical_smiles
from pepsmiles.constants import (
    CLI_FAILED_FILENAME,
    CLI_ID_COLUMN,
    CLI_OUTPUT_FILENAME,
)
from pepsmiles.peptide.parsing import parse_cross_links

# Suppress RDKit warnings
RDLogger.DisableLog('rdApp.*')

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s | %(levelname)s | %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)


class PeptideRecord(NamedTuple):
    peptide_id: str
    sequence: str
    cross_links: str = ""
    cyclization: str = ""


def read_records(input_path: Path) -> List[PeptideRecord]:
    """
    Read peptide records from a TSV file.

    Returns:
        Records in file order.
    """
    records = []
    with open(input_path, 'r', encoding='utf-8') as f:
        for line_no, line in enumerate(f, start=1):
            line = line.rstrip('\n')
            if not line.strip() or line.lstrip().startswith('#'):
                continue
            fields = line.split('\t')
            if fields[0].strip().lower() == CLI_ID_COLUMN:
                continue
            if len(fields) < 2 or len(fields) > 4:
                logger.warning(f"Skipping malformed line {line_no} in {input_path}")
                continue
            records.append(PeptideRecord(*(field.strip() for field in fields)))
    return records


def build_peptide(record: PeptideRecord) -> Peptide:
    peptide = Peptide.from_sequence(record.sequence, cyclization=record.cyclization or None)
    for cross_link in parse_cross_links(record.cross_links):
        peptide.add_cross_link(cross_link)
    return peptide


def process_single_peptide(
    record: PeptideRecord,
    canonical: bool,
) -> Tuple[str, bool, str]:
    """
    Generate the SMILES for one record.

    Returns:
        (peptide_id, success, smiles or error message)
    """
    try:
        smiles = build_peptide(record).smiles()
        if canonical:
            smiles = canonical_smiles(smiles)
        return record.peptide_id, True, smiles
    except PepsmilesError as e:
        return record.peptide_id, False, str(e)


def process_wrapper(args):
    """Wrapper for multiprocessing."""
    return process_single_peptide(*args)


def load_done_ids(output_path: Path) -> Set[str]:
    """Ids already written to a previous output file."""
    if not output_path.exists():
        return set()
    with open(output_path, 'r', encoding='utf-8') as f:
        return {line.split('\t', 1)[0] for line in f if line.strip()}


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        description='Generate SMILES strings for a batch of peptide sequences'
    )
    parser.add_argument(
        '--input', type=str, required=True,
        help='TSV file: id, sequence, optional cross_links and cyclization'
    )
    parser.add_argument(
        '--output_dir', type=str, required=True,
        help='Output directory for the SMILES table'
    )
    parser.add_argument(
        '--num_workers', type=int, default=1,
        help='Number of parallel workers (default: 1)'
    )
    parser.add_argument(
        '--resume', action='store_true',
        help='Skip ids already present in the output table'
    )
    parser.add_argument(
        '--limit', type=int, default=None,
        help='Limit number of peptides to process'
    )
    parser.add_argument(
        '--canonical', action='store_true',
        help='Write RDKit canonical SMILES instead of backbone-ordered SMILES'
    )
    args = parser.parse_args(argv)

    logger.info(f"Options: canonical={args.canonical}, num_workers={args.num_workers}")

    records = read_records(Path(args.input))
    logger.info(f"Found {len(records)} peptides in {args.input}")

    if args.limit:
        records = records[:args.limit]
        logger.info(f"Limited to {len(records)} peptides")

    output_dir = Path(args.output_dir)
    output_path = output_dir / CLI_OUTPUT_FILENAME

    if args.resume:
        done = load_done_ids(output_path)
        original_count = len(records)
        records = [r for r in records if r.peptide_id not in done]
        skipped = original_count - len(records)
        logger.info(f"Resuming: {skipped} already processed, {len(records)} remaining")

    if not records:
        logger.info("No peptides to process")
        return

    output_dir.mkdir(parents=True, exist_ok=True)

    success_count = 0
    fail_count = 0
    failed_peptides = []

    start_time = time.time()
    mode = 'a' if args.resume else 'w'

    with open(output_path, mode, encoding='utf-8') as out:
        if args.num_workers == 1:
            # Single process mode
            with tqdm(records, desc="Processing", unit="peptide") as pbar:
                for record in pbar:
                    pid, success, result = process_single_peptide(record, args.canonical)
                    if success:
                        success_count += 1
                        out.write(f"{pid}\t{result}\n")
                    else:
                        fail_count += 1
                        failed_peptides.append((pid, result))
                        logger.warning(f"{pid}: {result}")
                        pbar.set_postfix_str(f"{pid}: FAILED")
        else:
            # Multi-process mode
            logger.info(f"Using {args.num_workers} workers")
            tasks = [(record, args.canonical) for record in records]

            with ProcessPoolExecutor(max_workers=args.num_workers) as executor:
                futures = {executor.submit(process_wrapper, task): task[0] for task in tasks}

                with tqdm(total=len(futures), desc="Processing", unit="peptide") as pbar:
                    for future in as_completed(futures):
                        pid, success, result = future.result()
                        if success:
                            success_count += 1
                            out.write(f"{pid}\t{result}\n")
                        else:
                            fail_count += 1
                            failed_peptides.append((pid, result))
                        pbar.update(1)
                        pbar.set_postfix_str(f"ok={success_count}, fail={fail_count}")

    # Summary
    elapsed = time.time() - start_time
    logger.info("=" * 60)
    logger.info("SUMMARY")
    logger.info("=" * 60)
    logger.info(f"Total processed: {success_count + fail_count}")
    logger.info(f"Success: {success_count}")
    logger.info(f"Failed: {fail_count}")
    logger.info(f"Time: {elapsed:.1f}s")
    logger.info(f"SMILES written to: {output_path}")

    if failed_peptides:
        fail_log = output_dir / CLI_FAILED_FILENAME
        with open(fail_log, 'w', encoding='utf-8') as f:
            for pid, error in failed_peptides:
                f.write(f"{pid}\t{error}\n")
        logger.info(f"Failed peptides saved to: {fail_log}")


if __name__ == '__main__':
    main()
