#!/usr/bin/env python3
"""
Unit tests for turning assembled blocks into AlignmentRecords
"""
import json
import unittest

from cmsearch.config.parser_config import ParserConfig
from cmsearch.models.alignment import AlignmentBlock, AlignmentRecord, PendingHit
from cmsearch.parsers.record_builder import RecordBuilder


def make_block(structure="<<<..>>>", model="AAA--AAA", midline="AAA  AAA", hit="AAACCAAA"):
    block = AlignmentBlock(column_offset=11, field_width=len(structure))
    for text in (structure, model, midline, hit):
        block.append(text)
    return block


class TestIdentifierExtraction(unittest.TestCase):
    """Tests for accession heuristics on raw sequence names"""

    def setUp(self):
        self.builder = RecordBuilder()

    def test_gi_accession(self):
        self.assertEqual(self.builder.extract_sequence_id("gi|2239287|gb|U32687.1|"), "2239287")

    def test_other_prefixes(self):
        self.assertEqual(self.builder.extract_sequence_id("ref|123456|"), "123456")
        self.assertEqual(self.builder.extract_sequence_id("lcl|42"), "42")

    def test_unmatched_name_returned_unchanged(self):
        self.assertEqual(self.builder.extract_sequence_id("chr2_random"), "chr2_random")
        self.assertEqual(self.builder.extract_sequence_id("sp|P12345|RL2_ECOLI"), "sp|P12345|RL2_ECOLI")

    def test_empty_name(self):
        self.assertEqual(self.builder.extract_sequence_id(""), "")


class TestRecordBuilder(unittest.TestCase):
    """Tests for RecordBuilder.build"""

    def setUp(self):
        self.config = ParserConfig(model_identifier="Lysine", accession="RF00168",
                                   descriptor_label="Lysine riboswitch")
        self.builder = RecordBuilder(self.config)

    def test_ungapped_length(self):
        self.assertEqual(RecordBuilder.ungapped_length("AAA--AAA"), 6)
        self.assertEqual(RecordBuilder.ungapped_length("aC-g..U~"), 4)
        self.assertEqual(RecordBuilder.ungapped_length("----"), 0)

    def test_build_record(self):
        hit = PendingHit.from_summary("seqA", 120, 45, 30.5)
        record = self.builder.build(make_block(), hit)

        self.assertEqual(record.model_start, 1)
        self.assertEqual(record.model_end, 6)
        self.assertEqual((record.hit_start, record.hit_end, record.hit_strand), (45, 120, -1))
        self.assertEqual(record.score, 30.5)
        self.assertEqual(record.sequence_id, "seqA")
        self.assertEqual(record.raw_sequence_name, "seqA")
        self.assertEqual(record.model_line, "AAA--AAA")
        self.assertEqual(record.secondary_structure, "<<<..>>>")
        self.assertEqual(record.midline, "AAA  AAA")
        self.assertEqual(record.hit_line, "AAACCAAA")
        self.assertEqual(record.primary_tag, "misc_binding")
        self.assertEqual(record.source_tag, "Infernal 0.71")
        self.assertEqual(record.display_name, "Lysine riboswitch")

    def test_score_equal_to_minscore_rejected(self):
        builder = RecordBuilder(ParserConfig(minscore=30.5))
        self.assertIsNone(builder.build(make_block(), PendingHit.from_summary("s", 1, 8, 30.5)))
        self.assertIsNotNone(builder.build(make_block(), PendingHit.from_summary("s", 1, 8, 30.51)))

    def test_default_minscore_rejects_negative_scores(self):
        self.assertIsNone(self.builder.build(make_block(), PendingHit.from_summary("s", 1, 8, -1.0)))
        self.assertIsNone(self.builder.build(make_block(), PendingHit.from_summary("s", 1, 8, 0.0)))

    def test_missing_hit_or_block(self):
        self.assertIsNone(self.builder.build(make_block(), None))
        self.assertIsNone(self.builder.build(None, PendingHit.from_summary("s", 1, 8, 10.0)))
        empty = AlignmentBlock(column_offset=4)
        self.assertIsNone(self.builder.build(empty, PendingHit.from_summary("s", 1, 8, 10.0)))

    def test_accession_used_as_sequence_id(self):
        hit = PendingHit.from_summary("gi|2239287|gb|U32687.1|", 20, 100, 45.37)
        record = self.builder.build(make_block(), hit)
        self.assertEqual(record.sequence_id, "2239287")
        self.assertEqual(record.raw_sequence_name, "gi|2239287|gb|U32687.1|")
        self.assertEqual(record.tags['seq_name'], "gi|2239287|gb|U32687.1|")


class TestAlignmentRecordFeatures(unittest.TestCase):
    """Tests for the Biopython feature view of a record"""

    def setUp(self):
        builder = RecordBuilder(ParserConfig(model_identifier="Lysine", accession="RF00168",
                                             descriptor_label="Lysine riboswitch"))
        self.record = builder.build(make_block(), PendingHit.from_summary("seqA", 120, 45, 30.5))

    def test_query_feature(self):
        query = self.record.query_feature()
        self.assertEqual(query.type, "misc_binding")
        self.assertEqual(query.id, "RF00168")
        self.assertEqual(int(query.location.start), 0)
        self.assertEqual(int(query.location.end), 6)
        self.assertEqual(query.location.strand, 0)
        self.assertEqual(query.qualifiers['name'], ["Lysine"])
        self.assertEqual(query.qualifiers['score'], [30.5])
        self.assertEqual(query.qualifiers['source'], ["Infernal 0.71"])

    def test_hit_feature(self):
        hit = self.record.hit_feature()
        self.assertEqual(hit.id, "seqA")
        self.assertEqual(int(hit.location.start), 44)
        self.assertEqual(int(hit.location.end), 120)
        self.assertEqual(hit.location.strand, -1)
        self.assertEqual(hit.qualifiers['name'], ["Lysine riboswitch"])
        self.assertEqual(hit.qualifiers['secstructure'], ["<<<..>>>"])
        self.assertEqual(hit.qualifiers['model'], ["AAA--AAA"])
        self.assertEqual(hit.qualifiers['midline'], ["AAA  AAA"])
        self.assertEqual(hit.qualifiers['hit'], ["AAACCAAA"])
        self.assertEqual(hit.qualifiers['seq_name'], ["seqA"])

    def test_feature_pair_shares_score(self):
        query, hit = self.record.feature_pair()
        self.assertEqual(query.qualifiers['score'], hit.qualifiers['score'])

    def test_to_dict_is_json_serialisable(self):
        data = json.loads(json.dumps(self.record.to_dict()))
        self.assertEqual(data['model_start'], 1)
        self.assertEqual(data['model_end'], 6)
        self.assertEqual(data['model_strand'], 0)
        self.assertEqual(data['hit_strand'], -1)
        self.assertEqual(data['score'], 30.5)

    def test_str(self):
        self.assertEqual(str(self.record), "seqA:45-120(-) model 1-6 30.50 bits")

    def test_invalid_coordinates_rejected(self):
        with self.assertRaises(ValueError):
            AlignmentRecord(model_end=3, hit_start=10, hit_end=5, hit_strand=1, score=1.0,
                            sequence_id="s", raw_sequence_name="s", secondary_structure="",
                            model_line="", midline="", hit_line="", primary_tag="t",
                            source_tag="Infernal 0.71")


if __name__ == '__main__':
    unittest.main()
