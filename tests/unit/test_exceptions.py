"""Unit tests for custom exceptions."""

from appa.core.exceptions import AppaError, ConfigurationError


class TestAppaError:
    """Test AppaError class."""
    
    def test_message_only(self):
        """Test string form without details."""
        error = AppaError("Something failed")
        
        assert str(error) == "Something failed"
        assert error.details == {}
    
    def test_with_details(self):
        """Test string form with details."""
        error = AppaError("Something failed", {"key": "value"})
        
        assert str(error) == "Something failed (key='value')"


class TestConfigurationError:
    """Test ConfigurationError class."""
    
    def test_setting_and_value_in_details(self):
        """Test setting and value are recorded."""
        error = ConfigurationError("Bad value", setting="APPA_LOG_FORMAT", value="xml")
        
        assert isinstance(error, AppaError)
        assert error.setting == "APPA_LOG_FORMAT"
        assert error.value == "xml"
        assert error.details == {"setting": "APPA_LOG_FORMAT", "value": "xml"}
    
    def test_empty_value_recorded(self):
        """Test an empty value is still recorded."""
        error = ConfigurationError("Bad value", setting="APPA_LOG_LEVEL", value="")
        
        assert error.details["value"] == ""
    
    def test_string_includes_setting_and_value(self):
        """Test the rendered message names the offending setting."""
        error = ConfigurationError("Unsupported log format", setting="APPA_LOG_FORMAT", value="xml")
        
        assert str(error) == "Unsupported log format (setting='APPA_LOG_FORMAT', value='xml')"
