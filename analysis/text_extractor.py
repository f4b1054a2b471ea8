"""
Manuscript text extraction from local files
"""
import logging
import re
from pathlib import Path

import PyPDF2
import pdfplumber

logger = logging.getLogger(__name__)


class ManuscriptReadError(Exception):
    """The manuscript file could not be read"""


class ManuscriptReader:
    """Reads plain text or PDF manuscripts into a single string"""
    
    @staticmethod
    def read(path) -> str:
        """Read a manuscript file and return its normalized text"""
        path = Path(path)
        if not path.is_file():
            raise ManuscriptReadError(f"Manuscript file not found: {path}")
        
        if path.suffix.lower() == ".pdf":
            text = ManuscriptReader._extract_pdf(path)
        else:
            try:
                text = path.read_bytes().decode("utf-8", errors="replace")
            except OSError as e:
                raise ManuscriptReadError(f"Could not read {path}: {e}") from e
        
        text = ManuscriptReader._clean_text(text)
        logger.info(f"Read {len(text)} characters from {path.name}")
        return text
    
    @staticmethod
    def _extract_pdf(path: Path) -> str:
        try:
            with pdfplumber.open(path) as pdf:
                pages = [page.extract_text() for page in pdf.pages]
                return "\n\n".join(text for text in pages if text)
        
        except Exception as e:
            logger.warning(f"pdfplumber failed, trying PyPDF2: {e}")
        
        try:
            with open(path, 'rb') as file:
                pdf_reader = PyPDF2.PdfReader(file)
                pages = [page.extract_text() for page in pdf_reader.pages]
                return "\n\n".join(text for text in pages if text)
        
        except Exception as e:
            logger.error(f"Both PDF extraction methods failed: {e}")
            raise ManuscriptReadError(f"Could not extract text from {path.name}") from e
    
    @staticmethod
    def _clean_text(text: str) -> str:
        """Normalize whitespace and common ligatures"""
        text = text.replace('ﬁ', 'fi').replace('ﬂ', 'fl')
        text = re.sub(r'[ \t]+', ' ', text)
        text = re.sub(r'\n\s*\n+', '\n\n', text)
        return text.strip()
