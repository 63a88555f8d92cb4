"""
Unit Tests for Services
========================
Tests for service layer classes against a mocked database handler.
"""

import pytest
from unittest.mock import Mock, patch

from catalog.pricing import DEFAULT_ROI_INPUTS
from catalog.symphony import DEFAULT_AGENTS, DEFAULT_PHASES
from readiness_wizard import ReadinessWizard
from services.assessment_service import AssessmentService
from services.knowledge_service import KnowledgeService
from services.persona_service import PersonaService
from services.roi_service import ROIService
from services.session_manager import SessionManager
from services.symphony_service import SymphonyService


def _upload(name, data):
    upload = Mock()
    upload.name = name
    upload.getvalue.return_value = data
    return upload


class TestAssessmentService:
    """Test suite for AssessmentService."""

    def test_service_initialization(self, mock_db_handler):
        """Test service initialization."""
        service = AssessmentService(mock_db_handler)
        assert service.db == mock_db_handler

    def test_save_wizard(self, mock_db_handler):
        """Test saving a quick wizard result."""
        mock_db_handler.create_assessment.return_value = {'id': 'a1'}
        service = AssessmentService(mock_db_handler)

        record = ReadinessWizard().to_record('user_1')
        result = service.save_wizard('user_1', record)

        assert result == {'id': 'a1'}
        saved = mock_db_handler.create_assessment.call_args[0][0]
        assert saved['user_id'] == 'user_1'
        assert saved['readiness_score'] == 42

    def test_save_wizard_score_out_of_range(self, mock_db_handler):
        """Test scores outside 0-100 are rejected."""
        service = AssessmentService(mock_db_handler)

        assert service.save_wizard('user_1', {'readiness_score': 140}) is None
        assert service.save_wizard('user_1', {}) is None
        mock_db_handler.create_assessment.assert_not_called()

    def test_save_enhanced_requires_scores(self, mock_db_handler):
        """Test an empty enhanced result is not saved."""
        service = AssessmentService(mock_db_handler)

        assert service.save_enhanced('user_1', {'dimension_scores': []}) is None
        mock_db_handler.create_assessment.assert_not_called()

    def test_save_enhanced(self, mock_db_handler):
        """Test enhanced results are shaped as assessment rows."""
        mock_db_handler.create_assessment.return_value = {'id': 'a2'}
        service = AssessmentService(mock_db_handler)
        result = {
            'assessment_type': 'internal',
            'organization_name': 'Acme',
            'total_score': 55,
            'dimension_scores': [{'dimension_id': 'talent_skills', 'percentage': 55}],
        }

        service.save_enhanced('user_1', result)

        row = mock_db_handler.create_assessment.call_args[0][0]
        assert row['readiness_score'] == 55
        assert row['organization_profile']['assessmentType'] == 'internal'
        assert 'talent_skills' in row['technical_readiness']

    def test_latest_score(self, mock_db_handler):
        """Test the newest assessment score."""
        mock_db_handler.get_assessments.return_value = [{'readiness_score': 61}, {'readiness_score': 40}]
        service = AssessmentService(mock_db_handler)

        assert service.latest_score('user_1') == 61
        mock_db_handler.get_assessments.return_value = []
        assert service.latest_score('user_1') is None


class TestKnowledgeService:
    """Test suite for KnowledgeService."""

    def test_create_document_generates_slug(self, mock_db_handler):
        """Test creating a document with a derived slug."""
        mock_db_handler.create_document.return_value = {'id': 'd1'}
        service = KnowledgeService(mock_db_handler)

        result = service.create_document('user_1', '  Copilot Rollout ', 'Body', tags=['ai', ' ', 'ms '])

        assert result == {'id': 'd1'}
        user_id, document = mock_db_handler.create_document.call_args[0]
        assert user_id == 'user_1'
        assert document['title'] == 'Copilot Rollout'
        assert document['slug'] == 'copilot-rollout'
        assert document['category'] == 'general'
        assert document['tags'] == ['ai', 'ms']

    def test_create_document_invalid(self, mock_db_handler):
        """Test blank titles and bad slugs are rejected."""
        service = KnowledgeService(mock_db_handler)

        assert service.create_document('user_1', '   ', 'Body') is None
        assert service.create_document('user_1', 'Title', 'Body', slug='Not A Slug') is None
        mock_db_handler.create_document.assert_not_called()

    def test_get_document_invalid_slug(self, mock_db_handler):
        """Test invalid slugs never reach the database."""
        service = KnowledgeService(mock_db_handler)

        assert service.get_document('Bad Slug') is None
        mock_db_handler.get_document_by_slug.assert_not_called()

    def test_update_document_filters_fields(self, mock_db_handler):
        """Test only editable fields are sent."""
        mock_db_handler.update_document.return_value = {'id': 'd1'}
        service = KnowledgeService(mock_db_handler)

        service.update_document('d1', title='New', user_id='someone-else')

        mock_db_handler.update_document.assert_called_once_with('d1', {'title': 'New'})

    def test_update_document_rejects_bad_slug(self, mock_db_handler):
        """Test slug validation on update."""
        service = KnowledgeService(mock_db_handler)

        assert service.update_document('d1', slug='Bad Slug') is None
        assert service.update_document('d1', owner='x') is None
        mock_db_handler.update_document.assert_not_called()

    def test_import_files(self, mock_db_handler):
        """Test supported files are imported and failures reported."""
        mock_db_handler.create_documents.side_effect = lambda user_id, docs: docs
        service = KnowledgeService(mock_db_handler)
        files = [
            _upload('team-handbook.md', b'# Handbook'),
            _upload('legacy.doc', b''),
            _upload('photo.png', b''),
        ]

        result = service.import_files('user_1', files, category='policies')

        assert [d['slug'] for d in result['imported']] == ['team-handbook']
        assert result['imported'][0]['category'] == 'policies'
        assert [e['file'] for e in result['errors']] == ['legacy.doc', 'photo.png']

    def test_import_corrupt_files(self, mock_db_handler):
        """Test unreadable DOCX and PDF files fail alone and the rest import."""
        mock_db_handler.create_documents.side_effect = lambda user_id, docs: docs
        service = KnowledgeService(mock_db_handler)
        files = [
            _upload('onboarding.md', b'# Welcome'),
            _upload('broken.docx', b'not a zip'),
            _upload('broken.pdf', b'not a pdf'),
        ]

        result = service.import_files('user_1', files)

        assert [d['slug'] for d in result['imported']] == ['onboarding']
        assert [e['file'] for e in result['errors']] == ['broken.docx', 'broken.pdf']
        assert all(e['message'].startswith('Extraction failed') for e in result['errors'])

    def test_import_nothing_valid(self, mock_db_handler):
        """Test the database is not called when every file fails."""
        service = KnowledgeService(mock_db_handler)

        result = service.import_files('user_1', [_upload('photo.png', b'')])

        assert result['imported'] == []
        mock_db_handler.create_documents.assert_not_called()


class TestROIService:
    """Test suite for ROIService."""

    def test_save_calculation(self, mock_db_handler):
        """Test outputs are recalculated and saved with inputs."""
        mock_db_handler.create_roi_calculation.return_value = {'id': 'r1'}
        service = ROIService(mock_db_handler)
        inputs = {**DEFAULT_ROI_INPUTS, 'extra': 1}

        result = service.save_calculation('user_1', ' Q3 pilot ', inputs, ['msft-copilot'])

        assert result == {'id': 'r1'}
        user_id, name, clean_inputs, outputs, platforms = mock_db_handler.create_roi_calculation.call_args[0]
        assert (user_id, name, platforms) == ('user_1', 'Q3 pilot', ['msft-copilot'])
        assert 'extra' not in clean_inputs
        assert outputs['total_cost'] == 60000

    @pytest.mark.parametrize("name,changes", [
        ('', {}),
        ('Valid', {'employees': -1}),
    ])
    def test_save_calculation_invalid(self, mock_db_handler, name, changes):
        """Test missing names and negative inputs are rejected."""
        service = ROIService(mock_db_handler)

        assert service.save_calculation('user_1', name, {**DEFAULT_ROI_INPUTS, **changes}) is None
        mock_db_handler.create_roi_calculation.assert_not_called()

    def test_save_calculation_missing_input(self, mock_db_handler):
        """Test every calculator input is required."""
        service = ROIService(mock_db_handler)
        inputs = dict(DEFAULT_ROI_INPUTS)
        del inputs['training_cost']

        assert service.save_calculation('user_1', 'Valid', inputs) is None

    def test_delete_calculation(self, mock_db_handler):
        """Test deleting a calculation."""
        mock_db_handler.delete_roi_calculation.return_value = True
        service = ROIService(mock_db_handler)

        assert service.delete_calculation('r1', 'user_1') is True
        mock_db_handler.delete_roi_calculation.assert_called_once_with('r1', 'user_1')


class TestPersonaService:
    """Test suite for PersonaService."""

    def test_create_persona_defaults(self, mock_db_handler):
        """Test unknown enum values fall back to defaults."""
        mock_db_handler.create_persona.return_value = {'id': 'p1'}
        service = PersonaService(mock_db_handler)

        service.create_persona('user_1', {'name': ' Dana ', 'status': 'weird',
                                          'communication_style': {'formality': 'formal'}})

        user_id, persona = mock_db_handler.create_persona.call_args[0]
        assert persona['name'] == 'Dana'
        assert persona['status'] == 'draft'
        assert persona['ai_interaction_style'] == 'balanced'
        assert persona['preferred_response_length'] == 'medium'
        assert persona['communication_style']['formality'] == 'formal'
        assert persona['communication_style']['detail_level'] == 'balanced'

    def test_create_persona_requires_name(self, mock_db_handler):
        """Test a name is required."""
        service = PersonaService(mock_db_handler)

        assert service.create_persona('user_1', {'name': '  '}) is None
        mock_db_handler.create_persona.assert_not_called()

    def test_update_persona_invalid_status(self, mock_db_handler):
        """Test unknown statuses are rejected on update."""
        service = PersonaService(mock_db_handler)

        assert service.update_persona('p1', {'status': 'deleted'}) is None
        mock_db_handler.update_persona.assert_not_called()

    def test_add_hat_within_allocation(self, mock_db_handler, sample_hats):
        """Test adding a hat that fits the remaining time."""
        mock_db_handler.get_hats.return_value = sample_hats
        mock_db_handler.create_hat.return_value = {'id': 'h3'}
        service = PersonaService(mock_db_handler)

        result = service.add_hat('user_1', 'p1', {'name': 'Mentor', 'time_percentage': 30})

        assert result == {'id': 'h3'}
        payload = mock_db_handler.create_hat.call_args[0][1]
        assert payload['persona_id'] == 'p1'
        assert payload['priority'] == 2

    def test_add_hat_over_allocation(self, mock_db_handler, sample_hats):
        """Test hats cannot push the total over 100%."""
        mock_db_handler.get_hats.return_value = sample_hats
        service = PersonaService(mock_db_handler)

        assert service.add_hat('user_1', 'p1', {'name': 'Mentor', 'time_percentage': 40}) is None
        mock_db_handler.create_hat.assert_not_called()

    def test_update_hat_excludes_itself(self, mock_db_handler, sample_hats):
        """Test an edited hat's old share is not double counted."""
        mock_db_handler.get_hats.return_value = sample_hats
        mock_db_handler.update_hat.return_value = {'id': 'h1'}
        service = PersonaService(mock_db_handler)

        assert service.update_hat('h1', 'p1', {'time_percentage': 80}) == {'id': 'h1'}
        assert service.update_hat('h1', 'p1', {'time_percentage': 90}) is None

    def test_save_export_creates_first_version(self, mock_db_handler, sample_persona):
        """Test the first export is version 1."""
        mock_db_handler.find_export.return_value = None
        mock_db_handler.insert_export.return_value = {'id': 'e1'}
        service = PersonaService(mock_db_handler)

        service.save_export('user_1', sample_persona, 'claude', 'You are...')

        payload = mock_db_handler.insert_export.call_args[0][1]
        assert payload['version'] == 1
        assert payload['name'] == 'Dana Lee - Claude System Prompt'
        mock_db_handler.update_export.assert_not_called()

    def test_save_export_bumps_version(self, mock_db_handler, sample_persona):
        """Test re-exporting updates the row with the next version."""
        mock_db_handler.find_export.return_value = {'id': 'e1', 'version': 2}
        service = PersonaService(mock_db_handler)

        service.save_export('user_1', sample_persona, 'gemini', 'New content')

        mock_db_handler.update_export.assert_called_once_with('e1', {'content': 'New content', 'version': 3})
        mock_db_handler.insert_export.assert_not_called()

    @pytest.mark.parametrize("ecosystem,export_type,content", [
        ('chatgpt', 'system_prompt', 'x'),
        ('claude', 'poster', 'x'),
        ('claude', 'system_prompt', '   '),
    ])
    def test_save_export_invalid(self, mock_db_handler, sample_persona, ecosystem, export_type, content):
        """Test invalid exports never reach the database."""
        service = PersonaService(mock_db_handler)

        assert service.save_export('user_1', sample_persona, ecosystem, content, export_type) is None
        mock_db_handler.find_export.assert_not_called()


class TestSymphonyService:
    """Test suite for SymphonyService."""

    def test_initialize_defaults(self, mock_db_handler):
        """Test phases are seeded before agents."""
        mock_db_handler.insert_symphony_rows.return_value = True
        service = SymphonyService(mock_db_handler)

        assert service.initialize_defaults('user_1') is True

        calls = mock_db_handler.insert_symphony_rows.call_args_list
        assert [c[0][0] for c in calls] == ['symphony_phases', 'symphony_agents']
        assert len(calls[0][0][1]) == len(DEFAULT_PHASES)
        assert len(calls[1][0][1]) == len(DEFAULT_AGENTS)
        assert all(row['user_id'] == 'user_1' for row in calls[1][0][1])

    def test_initialize_stops_when_phases_fail(self, mock_db_handler):
        """Test agents are not seeded when phases fail."""
        mock_db_handler.insert_symphony_rows.return_value = False
        service = SymphonyService(mock_db_handler)

        assert service.initialize_defaults('user_1') is False
        mock_db_handler.insert_symphony_rows.assert_called_once()

    def test_create_task(self, mock_db_handler):
        """Test new tasks start pending."""
        mock_db_handler.create_symphony_task.return_value = {'id': 't1'}
        service = SymphonyService(mock_db_handler)

        service.create_task('user_1', ' Draft brief ', priority='high')

        row = mock_db_handler.create_symphony_task.call_args[0][0]
        assert row['title'] == 'Draft brief'
        assert row['status'] == 'pending'

    def test_create_task_invalid(self, mock_db_handler):
        """Test empty titles and unknown priorities."""
        service = SymphonyService(mock_db_handler)

        assert service.create_task('user_1', '') is None
        assert service.create_task('user_1', 'Task', priority='urgent') is None
        mock_db_handler.create_symphony_task.assert_not_called()

    def test_complete_task_stamps_time(self, mock_db_handler):
        """Test completing a task records completed_at."""
        service = SymphonyService(mock_db_handler)

        service.update_task('t1', {'status': 'complete'})

        table, task_id, payload = mock_db_handler.update_symphony_row.call_args[0]
        assert (table, task_id) == ('symphony_tasks', 't1')
        assert 'completed_at' in payload

    def test_update_phase_progress_range(self, mock_db_handler):
        """Test progress must stay within 0-100."""
        service = SymphonyService(mock_db_handler)

        assert service.update_phase('ph1', {'progress': 101}) is None
        assert service.update_phase('ph1', {'status': 'done'}) is None
        mock_db_handler.update_symphony_row.assert_not_called()

    def test_update_agent_status(self, mock_db_handler):
        """Test agent status validation."""
        service = SymphonyService(mock_db_handler)

        assert service.update_agent('a1', {'current_status': 'sleeping'}) is None
        service.update_agent('a1', {'current_status': 'busy'})
        mock_db_handler.update_symphony_row.assert_called_once_with(
            'symphony_agents', 'a1', {'current_status': 'busy'}
        )


class TestSessionManager:
    """Test suite for SessionManager."""

    @pytest.fixture(autouse=True)
    def session_state(self):
        with patch('services.session_manager.st') as mock_st:
            mock_st.session_state = {}
            yield mock_st.session_state

    def test_get_set_basic(self):
        """Test basic get/set operations."""
        SessionManager.set('test_key', 'test_value')

        assert SessionManager.get('test_key') == 'test_value'
        assert SessionManager.get('missing', 'default') == 'default'

    def test_delete_key(self):
        """Test deleting a key."""
        SessionManager.set('test_key', 'test_value')
        SessionManager.delete('test_key')
        SessionManager.delete('never_set')

        assert SessionManager.get('test_key') is None

    def test_get_or_create(self):
        """Test the factory only runs once."""
        factory = Mock(return_value={'employees': 10})

        first = SessionManager.get_or_create(SessionManager.ROI_INPUTS, factory)
        second = SessionManager.get_or_create(SessionManager.ROI_INPUTS, factory)

        assert first is second
        factory.assert_called_once()

    def test_generated_prompts(self):
        """Test prompts are stored per key."""
        SessionManager.set_generated_prompt('p1:claude', 'Prompt A')
        SessionManager.set_generated_prompt('p1:gemini', 'Prompt B')

        assert SessionManager.get_generated_prompt('p1:claude') == 'Prompt A'
        assert SessionManager.get_generated_prompt('p2:claude') is None

